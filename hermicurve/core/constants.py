# Smallest allowed gap between neighbouring control points along x.
MIN_POINT_X_DISTANCE = 0.01

# Floor applied to a tangent's x component; the slope divides by it.
MIN_TANGENT_X = 1e-6

# Below this |A| the derivative of a segment is treated as linear.
EXTREMA_EPSILON = 1e-4

# Slack for spacing checks, absorbs rounding in prev.x + MIN_POINT_X_DISTANCE.
SPACING_TOLERANCE = 1e-9

DEFAULT_SAMPLE_COUNT = 100
