import numpy as np

def segment_for_t(knots, degree, segmentCount, t):
    if t < knots[degree - 1]:
        return 0
    knot = int(np.searchsorted(knots, t, side = 'right')) - 1
    segment = min(knot - (degree - 1), segmentCount - 1)

    # Clamping high can land on trailing zero-length segments; back up to the last real one.
    while segment > 0 and not(knots[segment + degree] > knots[segment + degree - 1]):
        segment -= 1
    return segment

def deboor(positions, knots, degree, knotIndex, level, t):
    if level == 0:
        return positions[knotIndex]
    span = knots[knotIndex + degree - level] - knots[knotIndex - 1]
    alpha = 0.0 if span <= 0.0 else (t - knots[knotIndex - 1]) / span
    left = deboor(positions, knots, degree, knotIndex - 1, level - 1, t)
    right = deboor(positions, knots, degree, knotIndex, level - 1, t)
    return left * (1.0 - alpha) + right * alpha

def deboor_derivative(positions, knots, degree, knotIndex, level, t, derivativeOrder):
    # Ran out of degree before derivative order: the derivative is identically zero.
    if level == 0:
        return np.zeros(positions.shape[1:], positions.dtype)
    span = knots[knotIndex + degree - level] - knots[knotIndex - 1]
    multiplier = 0.0 if span <= 0.0 else level / span
    if derivativeOrder <= 1:
        return multiplier * (deboor(positions, knots, degree, knotIndex, level - 1, t) -
                             deboor(positions, knots, degree, knotIndex - 1, level - 1, t))
    return multiplier * (deboor_derivative(positions, knots, degree, knotIndex, level - 1, t, derivativeOrder - 1) -
                         deboor_derivative(positions, knots, degree, knotIndex - 1, level - 1, t, derivativeOrder - 1))

def locate(self, t):
    t = self.wrap_query(float(t))
    segment = segment_for_t(self.knots, self.degree, self.nSegments, t)
    return segment + self.degree, t

def derivatives(self, t, maxOrder):
    knotIndex, t = locate(self, t)
    values = [deboor(self.positions, self.knots, self.degree, knotIndex, self.degree, t)]
    for order in range(1, maxOrder + 1):
        values.append(deboor_derivative(self.positions, self.knots, self.degree, knotIndex, self.degree, t, order))
    return values

def derivative(self, t, derivativeOrder):
    if not(int(derivativeOrder) == derivativeOrder): raise ValueError("derivativeOrder must be an integer")
    if not(derivativeOrder >= 0): raise ValueError("derivativeOrder < 0")
    knotIndex, t = locate(self, t)
    if derivativeOrder == 0:
        return deboor(self.positions, self.knots, self.degree, knotIndex, self.degree, t)
    return deboor_derivative(self.positions, self.knots, self.degree, knotIndex, self.degree, t, int(derivativeOrder))

def position(self, t):
    return derivatives(self, t, 0)[0]

def tangent(self, t):
    return self.InterpolatedPT(*derivatives(self, t, 1))

def curvature(self, t):
    return self.InterpolatedPTC(*derivatives(self, t, 2))

def wiggle(self, t):
    return self.InterpolatedPTCW(*derivatives(self, t, 3))
