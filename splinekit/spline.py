import logging
import numpy as np
from splinekit.curve import Curve
from splinekit.error import InsufficientPointsError
import splinekit._spline_knots
import splinekit._spline_length

def _control_points(points, degree, alpha):
    if not(int(degree) == degree and degree >= 1): raise ValueError("degree must be a positive integer")
    if not(0.0 <= alpha <= 1.0): raise ValueError("alpha must be in [0, 1]")
    controlPoints = np.array(points, float)
    if controlPoints.ndim == 1:
        controlPoints = controlPoints.reshape(-1, 1)
    if controlPoints.ndim != 2: raise ValueError("points must be a sequence of scalars or vectors")
    if not(len(controlPoints) > degree): raise InsufficientPointsError(len(controlPoints), int(degree))
    controlPoints.flags.writeable = False
    return controlPoints

class BSpline(Curve):
    """
    An open B-spline curve of any degree through a sequence of control points.

    Parameters
    ----------
    points : array-like
        The control points, one per row. A 1D sequence is treated as points of dimension 1.

    degree : `int`, optional
        The polynomial degree of the spline. Default is 3.

    alpha : `float`, optional
        The knot spacing exponent: knots are spaced by the distance between control points
        raised to alpha. 0 is uniform (the default), 0.5 is centripetal, and 1 is chord length.

    Notes
    -----
    The curve has len(points) - degree segments. `degree - 1` padding knots are added at each
    end by extending the first and last chords, so the parameter range starts at 0.

    Raises `InsufficientPointsError` if there are not more points than the degree.
    """

    def __init__(self, points, degree = 3, alpha = 0.0):
        self.controlPoints = _control_points(points, degree, alpha)
        self.degree = int(degree)
        self.alpha = float(alpha)
        nPoints = len(self.controlPoints)
        padding = self.degree - 1

        indexToT = splinekit._spline_knots.compute_knots_with_outer_padding(self.controlPoints, self.alpha, padding)
        self.knots = splinekit._spline_knots.flatten_knots(indexToT, -padding, nPoints - 1 + padding)
        self.positions = self.controlPoints
        self.nSegments = nPoints - self.degree
        logging.info(f"BSpline: {nPoints} points, degree {self.degree}, {self.nSegments} segments")

    def wrap_query(self, t):
        return min(max(t, 0.0), self.max_t())

class LoopingBSpline(Curve):
    """
    A closed B-spline curve of any degree through a sequence of control points. The end of the
    point sequence wraps to its beginning, so the curve at `max_t` continues smoothly into the
    curve at 0.

    Parameters
    ----------
    points : array-like
        The control points, one per row. Do not repeat the first point at the end.

    degree : `int`, optional
        The polynomial degree of the spline. Default is 3.

    alpha : `float`, optional
        The knot spacing exponent (see `BSpline`). Default is 0.

    Notes
    -----
    The curve has len(points) segments. Query parameters are wrapped into [0, `max_t`).
    """

    def __init__(self, points, degree = 3, alpha = 0.0):
        self.controlPoints = _control_points(points, degree, alpha)
        self.degree = int(degree)
        self.alpha = float(alpha)
        nPoints = len(self.controlPoints)
        padding = self.degree - 1

        indexToT = splinekit._spline_knots.compute_looping_knots(self.controlPoints, self.alpha, padding)
        self.knots = splinekit._spline_knots.flatten_knots(indexToT, -padding, nPoints + padding)
        self.positions = splinekit._spline_knots.loop_positions(self.controlPoints, self.degree)
        self.nSegments = nPoints
        logging.info(f"LoopingBSpline: {nPoints} points, degree {self.degree}, {self.nSegments} segments")

    def wrap_query(self, t):
        return self.wrap_t(t)

    def wrap_t(self, t):
        """
        Wrap a parameter value into [0, `max_t`).

        Parameters
        ----------
        t : `float`
            Any parameter value.

        Returns
        -------
        t : `float`
        """
        maxT = self.max_t()
        if not(maxT > 0.0):
            return 0.0
        return float(t) % maxT

    def cyclic_arc_length(self, a, b):
        """
        Estimate the arc length travelling forward around the loop from a to b.

        Parameters
        ----------
        a, b : `float`
            The parameter values, wrapped into [0, `max_t`). If a is past b, the length runs
            through `max_t` and back around from 0.

        Returns
        -------
        length : `float`
        """
        return splinekit._spline_length.cyclic_arc_length(self, a, b)

    def is_looping(self):
        return True
