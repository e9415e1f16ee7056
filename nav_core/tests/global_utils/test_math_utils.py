import math

import pytest

from nav_core.global_utils.math_utils import normalise_heading

# -----------------------------------------------------------------
# normalise_heading
# -----------------------------------------------------------------


@pytest.mark.parametrize(
    "angle, expected",
    [
        (0, 0),
        (math.pi / 2, math.pi / 2),
        (-math.pi, -math.pi),
        (7 * math.pi / 2, -math.pi / 2),
        (2 * math.pi, 0),
        (-5 * math.pi / 2, -math.pi / 2),
    ],
)
def test_normalise_heading(angle, expected):
    result = normalise_heading(angle)
    assert -math.pi <= result < math.pi
    assert math.isclose(result, expected, abs_tol=1e-9)
