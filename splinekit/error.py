class InsufficientPointsError(ValueError):
    """Exception raised for building a spline from too few control points """
    def __init__(self, pointCount, degree,
                 message = "Spline needs more control points than its degree"):
        self.pointCount = pointCount
        self.degree = degree
        self.message = f"{message}: {pointCount} points for degree {degree}"
        super().__init__(self.message)
