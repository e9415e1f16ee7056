import numpy as np


def normalise_heading(angle: float) -> float:
    """Normalize an angle to the range [-π, π) radians, where 0 faces along positive x-axis.

    Parameters
    ----------
    angle : float
        The angle in radians to be normalized. The input angle can be any real number.

    Returns
    -------
    float
        The normalized angle in the range [-π, π) radians.
    """
    return float((angle + np.pi) % (2 * np.pi) - np.pi)
