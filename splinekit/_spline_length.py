import logging
from functools import lru_cache
import numpy as np
import scipy as sp
from splinekit._spline_evaluation import segment_for_t, deboor_derivative

@lru_cache(maxsize = None)
def gauss_legendre(order):
    abscissas, weights = np.polynomial.legendre.leggauss(order)
    abscissas.flags.writeable = False
    weights.flags.writeable = False
    return abscissas, weights

def segment_length(self, segment, a, b):
    knotIndex = segment + self.degree

    # Zero-length segments come from repeated knots and have no arc length.
    if not(self.knots[knotIndex] > self.knots[knotIndex - 1]):
        logging.debug(f"segment_length: skipping zero-length segment {segment}")
        return 0.0

    abscissas, weights = gauss_legendre(self.quadratureOrder)
    halfWidth = 0.5 * (b - a)
    center = 0.5 * (a + b)
    total = 0.0
    for x, weight in zip(abscissas, weights):
        speed = np.linalg.norm(deboor_derivative(self.positions, self.knots, self.degree, knotIndex,
                                                 self.degree, center + halfWidth * x, 1))
        total += weight * speed
    return float(halfWidth * total)

def clamp_t(self, t):
    return min(max(float(t), 0.0), self.max_t())

def arc_length(self, a, b):
    a = clamp_t(self, a)
    b = clamp_t(self, b)
    if a > b:
        a, b = b, a

    aSegment = segment_for_t(self.knots, self.degree, self.nSegments, a)
    bSegment = segment_for_t(self.knots, self.degree, self.nSegments, b)
    if aSegment == bSegment:
        return segment_length(self, aSegment, a, b)

    total = segment_length(self, aSegment, a, self.segment_t(aSegment + 1))
    for segment in range(aSegment + 1, bSegment):
        total += segment_length(self, segment, self.segment_t(segment), self.segment_t(segment + 1))
    total += segment_length(self, bSegment, self.segment_t(bSegment), b)
    return total

def total_length(self):
    total = 0.0
    for segment in range(self.nSegments):
        total += segment_length(self, segment, self.segment_t(segment), self.segment_t(segment + 1))
    return total

def cyclic_arc_length(self, a, b):
    a = self.wrap_t(a)
    b = self.wrap_t(b)
    if a <= b:
        return arc_length(self, a, b)
    return arc_length(self, a, self.max_t()) + arc_length(self, 0.0, b)

def solve_in_range(self, a, desiredLength):
    # Returns the parameter reached and the length left over past max_t.
    maxT = self.max_t()
    remaining = arc_length(self, a, maxT)
    if desiredLength >= remaining:
        return maxT, desiredLength - remaining
    b = sp.optimize.brentq(lambda b: arc_length(self, a, b) - desiredLength, a, maxT,
                           xtol = self.lengthTolerance)
    return float(b), 0.0

def solve_length(self, a, desiredLength):
    if self.is_looping():
        a = self.wrap_t(a)
        total = total_length(self)
        if not(total > 0.0):
            return a
        desiredLength = desiredLength % total
        if desiredLength == 0.0:
            return a
        b, leftover = solve_in_range(self, a, desiredLength)
        if leftover > 0.0:
            b, leftover = solve_in_range(self, 0.0, leftover)
        return self.wrap_t(b)

    a = clamp_t(self, a)
    if not(desiredLength > 0.0):
        return a
    b, leftover = solve_in_range(self, a, desiredLength)
    if leftover > 0.0:
        logging.debug(f"solve_length: curve ends {leftover} short of the requested length")
    return b

def partition(self, lengthBetween):
    if not(lengthBetween > 0.0): raise ValueError("lengthBetween must be positive")
    pieces = int(total_length(self) // lengthBetween)
    params = [0.0]
    t = 0.0
    for _ in range(pieces):
        t = solve_in_range(self, t, lengthBetween)[0]
        params.append(t)

    # On a loop, max_t is the same point as 0.
    if self.is_looping() and len(params) > 1 and abs(params[-1] - self.max_t()) <= 10.0 * self.lengthTolerance:
        params.pop()
    return np.array(params)
