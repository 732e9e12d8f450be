"""
Coefficient tables for the GOST 30319.3-2015 / ISO 20765-1 natural gas model
=============================================================================
Equation of state coefficients, component characteristics and binary
interaction parameters are those of the AGA8-DC92 detail characterization
method, on which GOST 30319.3-2015 (ISO 20765-1) is built.
Ideal gas heat capacity coefficients use the hyperbolic form of ISO 20765-2
(GERG-2008), with characteristic temperatures in K.

Binary interaction parameters are tabulated for the main pairs of natural
gas components; pairs not listed default to unity.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from pyrealgas.classes import gas_t


# =============================================================================
# Equation of state coefficients, n = 1..58
# =============================================================================
@dataclass(frozen=True)
class A0_3_coef:
    a: float
    b: int
    c: int
    k: int
    u: float
    g: int
    q: int
    f: int
    s: int
    w: int

#            a               b  c  k  u     g  q  f  s  w
_A0_3 = [
    (0.1538326,          1, 0, 0, 0.0,   0, 0, 0, 0, 0),
    (1.341953,           1, 0, 0, 0.5,   0, 0, 0, 0, 0),
    (-2.998583,          1, 0, 0, 1.0,   0, 0, 0, 0, 0),
    (-0.04831228,        1, 0, 0, 3.5,   0, 0, 0, 0, 0),
    (0.3757965,          1, 0, 0, -0.5,  1, 0, 0, 0, 0),
    (-1.589575,          1, 0, 0, 4.5,   1, 0, 0, 0, 0),
    (-0.05358847,        1, 0, 0, 0.5,   0, 1, 0, 0, 0),
    (0.88659463,         1, 0, 0, 7.5,   0, 0, 0, 1, 0),
    (-0.71023704,        1, 0, 0, 9.5,   0, 0, 0, 1, 0),
    (-1.471722,          1, 0, 0, 6.0,   0, 0, 0, 0, 1),
    (1.32185035,         1, 0, 0, 12.0,  0, 0, 0, 0, 1),
    (-0.78665925,        1, 0, 0, 12.5,  0, 0, 0, 0, 1),
    (2.29129e-09,        1, 1, 3, -6.0,  0, 0, 1, 0, 0),
    (0.1576724,          1, 1, 2, 2.0,   0, 0, 0, 0, 0),
    (-0.4363864,         1, 1, 2, 3.0,   0, 0, 0, 0, 0),
    (-0.04408159,        1, 1, 2, 2.0,   0, 1, 0, 0, 0),
    (-0.003433888,       1, 1, 4, 2.0,   0, 0, 0, 0, 0),
    (0.03205905,         1, 1, 4, 11.0,  0, 0, 0, 0, 0),
    (0.02487355,         2, 0, 0, -0.5,  0, 0, 0, 0, 0),
    (0.07332279,         2, 0, 0, 0.5,   0, 0, 0, 0, 0),
    (-0.001600573,       2, 1, 2, 0.0,   0, 0, 0, 0, 0),
    (0.6424706,          2, 1, 2, 4.0,   0, 0, 0, 0, 0),
    (-0.4162601,         2, 1, 2, 6.0,   0, 0, 0, 0, 0),
    (-0.06689957,        2, 1, 4, 21.0,  0, 0, 0, 0, 0),
    (0.2791795,          2, 1, 4, 23.0,  1, 0, 0, 0, 0),
    (-0.6966051,         2, 1, 4, 22.0,  0, 1, 0, 0, 0),
    (-0.002860589,       2, 1, 4, -1.0,  0, 0, 1, 0, 0),
    (-0.008098836,       3, 0, 0, -0.5,  0, 1, 0, 0, 0),
    (3.150547,           3, 1, 1, 7.0,   1, 0, 0, 0, 0),
    (0.007224479,        3, 1, 1, -1.0,  0, 0, 1, 0, 0),
    (-0.7057529,         3, 1, 2, 6.0,   0, 0, 0, 0, 0),
    (0.5349792,          3, 1, 2, 4.0,   1, 0, 0, 0, 0),
    (-0.07931491,        3, 1, 3, 1.0,   1, 0, 0, 0, 0),
    (-1.418465,          3, 1, 3, 9.0,   1, 0, 0, 0, 0),
    (-5.99905e-17,       3, 1, 4, -13.0, 0, 0, 1, 0, 0),
    (0.1058402,          3, 1, 4, 21.0,  0, 0, 0, 0, 0),
    (0.03431729,         3, 1, 4, 8.0,   0, 1, 0, 0, 0),
    (-0.007022847,       4, 0, 0, -0.5,  0, 0, 0, 0, 0),
    (0.02495587,         4, 0, 0, 0.0,   0, 0, 0, 0, 0),
    (0.04296818,         4, 1, 2, 2.0,   0, 1, 0, 0, 0),
    (0.7465453,          4, 1, 2, 7.0,   0, 0, 0, 0, 0),
    (-0.2919613,         4, 1, 2, 9.0,   0, 1, 0, 0, 0),
    (7.294616,           4, 1, 4, 22.0,  0, 0, 0, 0, 0),
    (-9.936757,          4, 1, 4, 23.0,  0, 0, 0, 0, 0),
    (-0.005399808,       5, 0, 0, 1.0,   0, 0, 0, 0, 0),
    (-0.2432567,         5, 1, 2, 9.0,   0, 0, 0, 0, 0),
    (0.04987016,         5, 1, 2, 3.0,   0, 1, 0, 0, 0),
    (0.003733797,        5, 1, 4, 8.0,   0, 0, 0, 0, 0),
    (1.874951,           5, 1, 4, 23.0,  0, 1, 0, 0, 0),
    (0.002168144,        6, 0, 0, 1.5,   0, 0, 0, 0, 0),
    (-0.6587164,         6, 1, 2, 5.0,   1, 0, 0, 0, 0),
    (0.000205518,        7, 0, 0, -0.5,  0, 1, 0, 0, 0),
    (0.009776195,        7, 1, 2, 4.0,   0, 0, 0, 0, 0),
    (-0.02048708,        8, 1, 1, 7.0,   1, 0, 0, 0, 0),
    (0.01557322,         8, 1, 2, 3.0,   0, 0, 0, 0, 0),
    (0.006862415,        8, 1, 2, 0.0,   0, 1, 0, 0, 0),
    (-0.001226752,       9, 1, 2, 1.0,   0, 0, 0, 0, 0),
    (0.002850908,        9, 1, 2, 0.0,   0, 1, 0, 0, 0),
]
A0_3_COEFS = [A0_3_coef(*row) for row in _A0_3]
A0_3_COEFS_COUNT = len(A0_3_COEFS)
B_TERMS = 18  # Terms n < B_TERMS contribute to the second virial coefficient
C_TERMS_START = 12  # Terms n >= C_TERMS_START carry the C*n mixture coefficients


# =============================================================================
# Component characteristics
# =============================================================================
@dataclass(frozen=True)
class ComponentCharacteristics:
    M: float  # Molar mass (g/mol)
    E: float  # Energy parameter (K)
    K: float  # Size parameter ((m³/kmol)^1/3)
    G: float  # Orientation parameter
    Q: float  # Quadrupole parameter
    F: float  # High temperature parameter
    S: float  # Dipole parameter
    W: float  # Association parameter

COMPONENTS: Dict[gas_t, ComponentCharacteristics] = {
    gas_t.METHANE:          ComponentCharacteristics(16.043,  151.3183,   0.4619255, 0.0,      0.0,      0.0, 0.0,    0.0),
    gas_t.NITROGEN:         ComponentCharacteristics(28.0135, 99.73778,   0.4479153, 0.027815, 0.0,      0.0, 0.0,    0.0),
    gas_t.CARBON_DIOXIDE:   ComponentCharacteristics(44.01,   241.9606,   0.4557489, 0.189065, 0.69,     0.0, 0.0,    0.0),
    gas_t.ETHANE:           ComponentCharacteristics(30.07,   244.1667,   0.5279209, 0.0793,   0.0,      0.0, 0.0,    0.0),
    gas_t.PROPANE:          ComponentCharacteristics(44.097,  298.1183,   0.583749,  0.141239, 0.0,      0.0, 0.0,    0.0),
    gas_t.WATER:            ComponentCharacteristics(18.0153, 514.0156,   0.3825868, 0.3325,   1.06775,  0.0, 1.5822, 1.0),
    gas_t.HYDROGEN_SULFIDE: ComponentCharacteristics(34.082,  296.355,    0.4618263, 0.0885,   0.633276, 0.0, 0.39,   0.0),
    gas_t.HYDROGEN:         ComponentCharacteristics(2.0159,  26.95794,   0.3514916, 0.034369, 0.0,      1.0, 0.0,    0.0),
    gas_t.CARBON_MONOXIDE:  ComponentCharacteristics(28.01,   105.5348,   0.4533894, 0.038953, 0.0,      0.0, 0.0,    0.0),
    gas_t.OXYGEN:           ComponentCharacteristics(31.9988, 122.7667,   0.4186954, 0.021,    0.0,      0.0, 0.0,    0.0),
    gas_t.ISO_BUTANE:       ComponentCharacteristics(58.123,  324.0689,   0.6406937, 0.256692, 0.0,      0.0, 0.0,    0.0),
    gas_t.N_BUTANE:         ComponentCharacteristics(58.123,  337.6389,   0.6341423, 0.281835, 0.0,      0.0, 0.0,    0.0),
    gas_t.ISO_PENTANE:      ComponentCharacteristics(72.15,   365.5999,   0.6738577, 0.332267, 0.0,      0.0, 0.0,    0.0),
    gas_t.N_PENTANE:        ComponentCharacteristics(72.15,   370.6823,   0.6798307, 0.366911, 0.0,      0.0, 0.0,    0.0),
    gas_t.HEXANE:           ComponentCharacteristics(86.177,  402.636293, 0.7175118, 0.289731, 0.0,      0.0, 0.0,    0.0),
    gas_t.HEPTANE:          ComponentCharacteristics(100.204, 427.72263,  0.7525189, 0.337542, 0.0,      0.0, 0.0,    0.0),
    gas_t.OCTANE:           ComponentCharacteristics(114.231, 450.325022, 0.784955,  0.383381, 0.0,      0.0, 0.0,    0.0),
    gas_t.NONANE:           ComponentCharacteristics(128.258, 470.840891, 0.8152731, 0.427354, 0.0,      0.0, 0.0,    0.0),
    gas_t.DECANE:           ComponentCharacteristics(142.285, 489.558373, 0.8437826, 0.469659, 0.0,      0.0, 0.0,    0.0),
    gas_t.HELIUM:           ComponentCharacteristics(4.0026,  2.610111,   0.3589888, 0.0,      0.0,      0.0, 0.0,    0.0),
    gas_t.ARGON:            ComponentCharacteristics(39.948,  119.6299,   0.4216551, 0.0,      0.0,      0.0, 0.0,    0.0),
}


# =============================================================================
# Binary interaction parameters
# =============================================================================
@dataclass(frozen=True)
class BinaryCoefs:
    E: float = 1.0
    U: float = 1.0  # V in GOST notation
    K: float = 1.0
    G: float = 1.0

UNITY_BINARY = BinaryCoefs()

_g = gas_t
_BINARY: Dict[Tuple[gas_t, gas_t], BinaryCoefs] = {
    (_g.METHANE, _g.NITROGEN):          BinaryCoefs(0.97164, 0.886106, 1.00363),
    (_g.METHANE, _g.CARBON_DIOXIDE):    BinaryCoefs(0.960644, 0.963827, 0.995933, 0.807653),
    (_g.METHANE, _g.PROPANE):           BinaryCoefs(0.994635, 0.990877, 1.007619),
    (_g.METHANE, _g.WATER):             BinaryCoefs(0.708218, 1.0, 1.00008),
    (_g.METHANE, _g.HYDROGEN_SULFIDE):  BinaryCoefs(0.931484, 0.736833, 1.00044),
    (_g.METHANE, _g.HYDROGEN):          BinaryCoefs(1.17052, 1.15639, 1.02326, 1.95731),
    (_g.METHANE, _g.CARBON_MONOXIDE):   BinaryCoefs(0.990126),
    (_g.METHANE, _g.ISO_BUTANE):        BinaryCoefs(1.01953),
    (_g.METHANE, _g.N_BUTANE):          BinaryCoefs(0.989844, 0.992291, 0.997596),
    (_g.METHANE, _g.ISO_PENTANE):       BinaryCoefs(1.00235),
    (_g.METHANE, _g.N_PENTANE):         BinaryCoefs(0.999268, 1.00362),
    (_g.METHANE, _g.HEXANE):            BinaryCoefs(1.107274, 1.302576, 0.982962),
    (_g.METHANE, _g.HEPTANE):           BinaryCoefs(0.88088, 1.191904, 0.983565),
    (_g.METHANE, _g.OCTANE):            BinaryCoefs(0.880973, 1.205769, 0.982707),
    (_g.METHANE, _g.NONANE):            BinaryCoefs(0.881067, 1.219634, 0.981849),
    (_g.METHANE, _g.DECANE):            BinaryCoefs(0.881161, 1.233498, 0.980991),
    (_g.NITROGEN, _g.CARBON_DIOXIDE):   BinaryCoefs(1.02274, 0.835058, 0.982361, 0.982746),
    (_g.NITROGEN, _g.ETHANE):           BinaryCoefs(0.97012, 0.816431, 1.00796),
    (_g.NITROGEN, _g.PROPANE):          BinaryCoefs(0.945939, 0.915502),
    (_g.NITROGEN, _g.WATER):            BinaryCoefs(0.746954),
    (_g.NITROGEN, _g.HYDROGEN_SULFIDE): BinaryCoefs(0.902271, 0.993476, 0.942596),
    (_g.NITROGEN, _g.HYDROGEN):         BinaryCoefs(1.08632, 0.408838, 1.03227),
    (_g.NITROGEN, _g.CARBON_MONOXIDE):  BinaryCoefs(1.00571),
    (_g.NITROGEN, _g.OXYGEN):           BinaryCoefs(1.021),
    (_g.NITROGEN, _g.ISO_BUTANE):       BinaryCoefs(0.946914),
    (_g.NITROGEN, _g.N_BUTANE):         BinaryCoefs(0.973384),
    (_g.NITROGEN, _g.ISO_PENTANE):      BinaryCoefs(0.95934),
    (_g.NITROGEN, _g.N_PENTANE):        BinaryCoefs(0.94552),
    (_g.CARBON_DIOXIDE, _g.ETHANE):     BinaryCoefs(0.925053, 0.96987, 1.00851, 0.370296),
    (_g.CARBON_DIOXIDE, _g.PROPANE):    BinaryCoefs(0.960237),
    (_g.CARBON_DIOXIDE, _g.WATER):      BinaryCoefs(0.849408, 1.0, 1.0, 1.67309),
    (_g.CARBON_DIOXIDE, _g.HYDROGEN_SULFIDE): BinaryCoefs(0.955052, 1.04529, 1.00779),
    (_g.CARBON_DIOXIDE, _g.HYDROGEN):   BinaryCoefs(1.28179),
    (_g.CARBON_DIOXIDE, _g.CARBON_MONOXIDE): BinaryCoefs(1.5, 1.0, 1.0, 0.9),
    (_g.CARBON_DIOXIDE, _g.ISO_BUTANE): BinaryCoefs(0.906849),
    (_g.CARBON_DIOXIDE, _g.N_BUTANE):   BinaryCoefs(0.897362),
    (_g.CARBON_DIOXIDE, _g.ISO_PENTANE): BinaryCoefs(0.726255),
    (_g.CARBON_DIOXIDE, _g.N_PENTANE):  BinaryCoefs(0.859764),
    (_g.CARBON_DIOXIDE, _g.HEXANE):     BinaryCoefs(0.855134),
    (_g.CARBON_DIOXIDE, _g.HEPTANE):    BinaryCoefs(0.831229),
    (_g.CARBON_DIOXIDE, _g.OCTANE):     BinaryCoefs(0.80831),
    (_g.CARBON_DIOXIDE, _g.NONANE):     BinaryCoefs(0.786323),
    (_g.CARBON_DIOXIDE, _g.DECANE):     BinaryCoefs(0.765171),
    (_g.ETHANE, _g.PROPANE):            BinaryCoefs(1.02256, 1.065173, 0.986893),
    (_g.ETHANE, _g.WATER):              BinaryCoefs(0.693168),
    (_g.ETHANE, _g.HYDROGEN_SULFIDE):   BinaryCoefs(0.946871, 0.971926, 0.999969),
    (_g.ETHANE, _g.HYDROGEN):           BinaryCoefs(1.16446, 1.61666, 1.02034),
}

def get_binary_coefs(i: gas_t, j: gas_t) -> BinaryCoefs:
    if i == j:
        return UNITY_BINARY
    coefs = _BINARY.get((i, j))
    if coefs is None:
        coefs = _BINARY.get((j, i), UNITY_BINARY)
    return coefs


# =============================================================================
# Ideal gas isobaric heat capacity
#   cp0/R = B + C·(D/T / sinh(D/T))² + E·(F/T / cosh(F/T))²
#             + G·(H/T / sinh(H/T))² + I·(J/T / cosh(J/T))²
# =============================================================================
@dataclass(frozen=True)
class A4_coef:
    B: float
    C: float = 0.0
    D: float = 0.0
    E: float = 0.0
    F: float = 0.0
    G: float = 0.0
    H: float = 0.0
    I: float = 0.0
    J: float = 0.0

CP0_COEFS: Dict[gas_t, A4_coef] = {
    gas_t.METHANE:          A4_coef(4.00088, 0.76315, 820.659, 0.0046, 178.41, 8.74432, 1062.82, -4.46921, 1090.53),
    gas_t.NITROGEN:         A4_coef(3.50031, 0.13732, 662.738, -0.1466, 680.562, 0.90066, 1740.06),
    gas_t.CARBON_DIOXIDE:   A4_coef(3.50002, 2.04452, 919.306, -1.06044, 865.07, 2.03366, 483.553, 0.01393, 341.109),
    gas_t.ETHANE:           A4_coef(4.00263, 4.33939, 559.314, 1.23722, 223.284, 13.1974, 1031.38, -6.01989, 1071.29),
    gas_t.PROPANE:          A4_coef(4.02939, 6.60569, 479.856, 3.197, 200.893, 19.1921, 955.312, -8.37267, 1027.29),
    gas_t.WATER:            A4_coef(4.00392, 0.01059, 268.795, 0.98763, 1141.41, 3.06904, 2507.37),
    gas_t.HYDROGEN_SULFIDE: A4_coef(4.0, 3.11942, 1833.63, 1.00243, 847.181),
    gas_t.HYDROGEN:         A4_coef(2.47906, 0.95806, 228.734, 0.45444, 326.843, 1.56039, 1651.71, -1.3756, 1671.69),
    gas_t.CARBON_MONOXIDE:  A4_coef(3.50055, 1.02865, 1550.45, 0.00493, 704.525),
    gas_t.OXYGEN:           A4_coef(3.50146, 1.07558, 2235.71, 1.01334, 1116.69),
    gas_t.ISO_BUTANE:       A4_coef(4.06714, 8.97575, 438.27, 5.25156, 198.018, 25.1423, 1905.02, -16.1388, 893.765),
    gas_t.N_BUTANE:         A4_coef(4.33944, 9.44893, 468.27, 6.89406, 183.636, 24.4618, 1914.1, 14.7824, 903.185),
    gas_t.ISO_PENTANE:      A4_coef(4.0, 11.7618, 292.503, 20.1101, 910.237, 33.1688, 1919.37),
    gas_t.N_PENTANE:        A4_coef(4.0, 8.95043, 178.67, 21.836, 840.538, 33.4032, 1774.25),
    gas_t.HEXANE:           A4_coef(4.0, 11.6977, 182.326, 26.8142, 859.207, 38.6164, 1826.59),
    gas_t.HEPTANE:          A4_coef(4.0, 13.7266, 169.789, 30.4707, 836.195, 43.5561, 1760.46),
    gas_t.OCTANE:           A4_coef(4.0, 15.6865, 158.922, 33.8029, 815.064, 48.1731, 1693.07),
    gas_t.NONANE:           A4_coef(4.0, 18.0241, 156.854, 38.1235, 814.882, 53.3415, 1693.79),
    gas_t.DECANE:           A4_coef(4.0, 21.0069, 164.947, 43.4931, 836.264, 58.3657, 1750.24),
    gas_t.HELIUM:           A4_coef(2.5),
    gas_t.ARGON:            A4_coef(2.5),
}


# =============================================================================
# Critical parameters, for the pseudo-critical point of a mixture
# =============================================================================
@dataclass(frozen=True)
class CriticalParams:
    temperature: float  # K
    density: float      # kg/m³
    acentric: float

CRITICAL_PARAMS: Dict[gas_t, CriticalParams] = {
    gas_t.METHANE:          CriticalParams(190.564, 162.66, 0.0114),
    gas_t.NITROGEN:         CriticalParams(126.192, 313.3, 0.0372),
    gas_t.CARBON_DIOXIDE:   CriticalParams(304.128, 467.6, 0.2239),
    gas_t.ETHANE:           CriticalParams(305.322, 206.18, 0.0995),
    gas_t.PROPANE:          CriticalParams(369.825, 220.48, 0.1521),
    gas_t.WATER:            CriticalParams(647.096, 322.0, 0.3443),
    gas_t.HYDROGEN_SULFIDE: CriticalParams(373.1, 347.28, 0.1005),
    gas_t.HYDROGEN:         CriticalParams(33.19, 31.26, -0.219),
    gas_t.CARBON_MONOXIDE:  CriticalParams(132.86, 303.9, 0.0497),
    gas_t.OXYGEN:           CriticalParams(154.581, 436.14, 0.0222),
    gas_t.ISO_BUTANE:       CriticalParams(407.81, 225.5, 0.184),
    gas_t.N_BUTANE:         CriticalParams(425.125, 227.84, 0.201),
    gas_t.ISO_PENTANE:      CriticalParams(460.35, 236.0, 0.2275),
    gas_t.N_PENTANE:        CriticalParams(469.7, 232.0, 0.251),
    gas_t.HEXANE:           CriticalParams(507.82, 233.18, 0.299),
    gas_t.HEPTANE:          CriticalParams(540.13, 232.0, 0.349),
    gas_t.OCTANE:           CriticalParams(569.32, 234.9, 0.393),
    gas_t.NONANE:           CriticalParams(594.55, 232.14, 0.443),
    gas_t.DECANE:           CriticalParams(617.7, 233.34, 0.488),
    gas_t.HELIUM:           CriticalParams(5.1953, 69.64, -0.385),
    gas_t.ARGON:            CriticalParams(150.687, 535.6, -0.0022),
}
