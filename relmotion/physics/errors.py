# relmotion/physics/errors.py


class InvalidEccentricity(ValueError):
    """Eccentricity outside [0, 1): the reference orbit is not an ellipse."""


class InvalidMeanMotion(ValueError):
    """Mean motion must be strictly positive."""
