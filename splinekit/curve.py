from collections import namedtuple
import splinekit._spline_evaluation
import splinekit._spline_length

class Curve:
    """
    A curve is the base class shared by the open and looping B-spline variants. It holds the
    control positions and flattened knots produced at construction and answers every query
    (position, derivatives, arc length) from them.

    Subclasses fill in `positions`, `knots`, `degree`, `alpha`, and `nSegments` and decide how
    query parameters outside the curve's range are handled (see `wrap_query`).
    """

    quadratureOrder = 13
    """Number of Gauss-Legendre points used to integrate the speed over a segment."""

    lengthTolerance = 1.0e-10
    """Parameter tolerance used when inverting arc length in `solve_length`."""

    InterpolatedPT = namedtuple('InterpolatedPT', ('position', 'tangent'))
    """Return type for tangent."""

    InterpolatedPTC = namedtuple('InterpolatedPTC', ('position', 'tangent', 'curvature'))
    """Return type for curvature."""

    InterpolatedPTCW = namedtuple('InterpolatedPTCW', ('position', 'tangent', 'curvature', 'wiggle'))
    """Return type for wiggle."""

    def __call__(self, t):
        return self.position(t)

    def __repr__(self):
        return f"{type(self).__name__}({self.controlPoints}, {self.degree}, alpha={self.alpha})"

    def wrap_query(self, t):
        """
        Map a query parameter before its segment is located. Open curves clamp it to
        [0, `max_t`]; looping curves wrap it around the loop.
        """
        return t

    def position(self, t):
        """
        Compute the position of the curve at a parameter value.

        Parameters
        ----------
        t : `float`
            The parameter value. Values outside [0, `max_t`] are clamped to the ends (open curves)
            or wrapped around the loop (looping curves).

        Returns
        -------
        position : `numpy.array`
            The point on the curve.

        See Also
        --------
        `tangent` : Compute the position and first derivative.
        `derivative` : Compute a derivative of any order.
        """
        return splinekit._spline_evaluation.position(self, t)

    def tangent(self, t):
        """
        Compute the position and first derivative of the curve at a parameter value.

        Parameters
        ----------
        t : `float`
            The parameter value.

        Returns
        -------
        result : `Curve.InterpolatedPT`
            The named tuple (position, tangent). The tangent is not normalized.
        """
        return splinekit._spline_evaluation.tangent(self, t)

    def curvature(self, t):
        """
        Compute the position, first, and second derivatives of the curve at a parameter value.

        Parameters
        ----------
        t : `float`
            The parameter value.

        Returns
        -------
        result : `Curve.InterpolatedPTC`
            The named tuple (position, tangent, curvature), where curvature is the second
            derivative with respect to the curve parameter.
        """
        return splinekit._spline_evaluation.curvature(self, t)

    def wiggle(self, t):
        """
        Compute the position and the first three derivatives of the curve at a parameter value.

        Parameters
        ----------
        t : `float`
            The parameter value.

        Returns
        -------
        result : `Curve.InterpolatedPTCW`
            The named tuple (position, tangent, curvature, wiggle), where wiggle is the third derivative.

        Notes
        -----
        Derivatives of higher order than the curve's degree are zero vectors.
        """
        return splinekit._spline_evaluation.wiggle(self, t)

    def derivative(self, t, derivativeOrder):
        """
        Compute a derivative of the curve of any order at a parameter value.

        Parameters
        ----------
        t : `float`
            The parameter value.

        derivativeOrder : `int`
            The order of the derivative. Zero returns the position.

        Returns
        -------
        value : `numpy.array`
            The derivative. It is the zero vector when derivativeOrder exceeds the degree.
        """
        return splinekit._spline_evaluation.derivative(self, t, derivativeOrder)

    def segment_length(self, segment, a, b):
        """
        Estimate the arc length of part of one segment with Gauss-Legendre quadrature.

        Parameters
        ----------
        segment : `int`
            The segment index, from 0 to `segment_count` - 1.

        a, b : `float`
            The parameter range to measure, within the segment's range.

        Returns
        -------
        length : `float`
            The arc length. Segments with a zero-length knot span return 0.
        """
        if not(0 <= segment < self.nSegments): raise ValueError(f"Invalid segment: {segment}")
        return splinekit._spline_length.segment_length(self, segment, a, b)

    def arc_length(self, a, b):
        """
        Estimate the arc length of the curve between two parameter values.

        Parameters
        ----------
        a, b : `float`
            The parameter values, clamped to [0, `max_t`]. Their order does not matter.

        Returns
        -------
        length : `float`

        See Also
        --------
        `total_length` : The length of the whole curve.
        `solve_length` : The inverse of arc_length.
        """
        return splinekit._spline_length.arc_length(self, a, b)

    def total_length(self):
        """
        Estimate the arc length of the whole curve.

        Returns
        -------
        length : `float`
        """
        return splinekit._spline_length.total_length(self)

    def solve_length(self, a, desiredLength):
        """
        Find the parameter value at a given arc length past a starting parameter value.

        Parameters
        ----------
        a : `float`
            The starting parameter value.

        desiredLength : `float`
            The arc length to travel along the curve from a.

        Returns
        -------
        b : `float`
            The parameter value for which arc_length(a, b) equals desiredLength. Open curves stop
            at `max_t` if the rest of the curve is shorter than desiredLength; looping curves
            continue around the loop.
        """
        return splinekit._spline_length.solve_length(self, a, desiredLength)

    def partition(self, lengthBetween):
        """
        Split the curve into pieces of equal arc length.

        Parameters
        ----------
        lengthBetween : `float`
            The arc length between consecutive parameter values.

        Returns
        -------
        params : `numpy.array`
            Parameter values starting at 0, each lengthBetween further along the curve than the last.
            On a looping curve `max_t` is left out, since it is the same point as 0.
        """
        return splinekit._spline_length.partition(self, lengthBetween)

    def max_t(self):
        """Return the largest parameter value of the curve."""
        return self.segment_t(self.nSegments)

    def segment_t(self, segment):
        """Return the parameter value where a segment begins (segment_count gives max_t)."""
        return float(self.knots[segment + self.degree - 1])

    def get_t(self, index):
        """
        Return the knot value for a control point index.

        Parameters
        ----------
        index : `int`
            The control point index. Negative indices and indices past the last point address
            the padding knots.

        Returns
        -------
        t : `float`
        """
        padding = self.degree - 1
        if not(-padding <= index < len(self.knots) - padding): raise ValueError(f"Invalid knot index: {index}")
        return float(self.knots[index + padding])

    def segment_count(self):
        """Return the number of segments."""
        return self.nSegments

    def is_looping(self):
        """Return True if the curve is closed."""
        return False

    def points(self):
        """Return the control points the curve was built from."""
        return self.controlPoints
