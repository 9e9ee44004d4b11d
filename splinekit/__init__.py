"""
splinekit is a python library for evaluating B-spline curves of any degree through a sequence of control points.

Available subpackages
---------------------
`splinekit.curve` : Provides the `Curve` base class with the queries shared by every curve: position,
    tangent, curvature, wiggle, derivatives of any order, and arc length.

`splinekit.spline` : Provides the `BSpline` (open) and `LoopingBSpline` (closed) subclasses of `Curve`, which
    build knots from the control points and evaluate the curve with the de Boor recursion.

`splinekit.error` : Provides `InsufficientPointsError`, raised when a spline has too few control points for its degree.
"""
from splinekit.curve import Curve
from splinekit.spline import BSpline, LoopingBSpline
from splinekit.error import InsufficientPointsError
