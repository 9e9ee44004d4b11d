import numpy as np

def chord_increment(left, right, alpha):
    # 0 ** 0 is 1, so alpha = 0 gives uniform spacing even for duplicate points
    return float(np.linalg.norm(right - left)) ** alpha

def compute_knots_with_outer_padding(points, alpha, padding):
    nPoints = len(points)
    indexToT = {0: 0.0}
    for i in range(1, nPoints):
        indexToT[i] = indexToT[i - 1] + chord_increment(points[i - 1], points[i], alpha)

    # Padding points continue the first and last chords in a straight line,
    # so every padding step repeats the increment of that chord.
    firstStep = chord_increment(points[0], points[1], alpha)
    lastStep = chord_increment(points[-2], points[-1], alpha)
    for i in range(1, padding + 1):
        indexToT[-i] = indexToT[1 - i] - firstStep
        indexToT[nPoints - 1 + i] = indexToT[nPoints - 2 + i] + lastStep
    return indexToT

def compute_looping_knots(points, alpha, padding):
    nPoints = len(points)
    indexToT = {0: 0.0}

    # One knot past nPoints + padding - 1 is produced so the last wrapped segment has a right-hand knot.
    for i in range(1, nPoints + padding + 1):
        indexToT[i] = indexToT[i - 1] + chord_increment(points[(i - 1) % nPoints], points[i % nPoints], alpha)
    for i in range(-1, -padding - 1, -1):
        indexToT[i] = indexToT[i + 1] - chord_increment(points[i % nPoints], points[(i + 1) % nPoints], alpha)
    return indexToT

def flatten_knots(indexToT, first, last):
    knots = np.array([indexToT[i] for i in range(first, last + 1)], float)
    knots.flags.writeable = False
    return knots

def loop_positions(points, degree):
    # Rotate the last point to the front and repeat the first degree - 1 points
    # at the back, so segment 0 starts at the first point and the recursion can
    # walk straight across the wrap.
    padding = degree - 1
    positions = np.concatenate((points[-1:], points, points[:padding]))
    positions.flags.writeable = False
    return positions
