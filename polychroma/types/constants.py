# Numeric constants shared by the conversion engine. No dependencies besides numpy.
import numpy as np

# Decimal digits kept when rounding interpolated channels and comparing values.
PRECISION = 6

# Luma coefficients weighting each RGB channel's contribution to perceived
# brightness in the HSP model.
# See: https://en.wikipedia.org/wiki/HSL_and_HSV#Lightness
PR = 0.2989
PG = 0.587
PB = 0.114

# Whitepoint used for RGB <-> XYZ. Not a CIE standard illuminant: calibrated so
# that RGB white maps to XYZ (100, 100, 100).
WHITEPOINT_X = 105.21266389510953
WHITEPOINT_Y = 100.0000000000007
WHITEPOINT_Z = 91.82249511582535

# sRGB companding
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_LINEAR_SLOPE = 12.92
SRGB_GAMMA = 2.4

RGB_TO_XYZ = np.array([
    [0.41239079926595, 0.35758433938387, 0.18048078840183],
    [0.21263900587151, 0.71516867876775, 0.072192315360733],
    [0.019330818715591, 0.11919477979462, 0.95053215224966],
])

XYZ_TO_RGB = np.array([
    [3.240969941904521, -1.537383177570093, -0.498610760293],
    [-0.96924363628087, 1.87596750150772, 0.041555057407175],
    [0.055630079696993, -0.20397695888897, 1.056971514242878],
])

# CIE L*a*b*
CIE_EPSILON = 0.008856
CIE_KAPPA = 903.3
CIE_LINEAR_SLOPE = 7.787
CIE_OFFSET = 16.0

# Oklab, see https://bottosson.github.io/posts/oklab/
LINEAR_RGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

OKLAB_TO_LMS = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
])

LMS_TO_LINEAR_RGB = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
])

# Chroma curve: chroma = ((L + CHROMA_OFFSET) / CHROMA_SCALE) ** CHROMA_EXPONENT
CHROMA_OFFSET = 0.028
CHROMA_SCALE = 1.028
CHROMA_EXPONENT = 6.9
CHROMA_PRECISION = 10

# Hues that warmer() and cooler() move towards.
WARM_HUE = 90
COOL_HUE = 270
