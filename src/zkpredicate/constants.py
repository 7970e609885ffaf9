"""
fixed sizes and numeric codes shared by the prover and the verifier

both sides must agree on these values; changing one changes the shape of
every query and commitment set.
"""

MAX_QUERY_SIZE = 20
MAX_NUM_OF_ATTRS = 20

# operation kinds (4-bit field)
EQ = 0
LEQ = 1
GT = 2
STOP = 15

KIND_BITS = 4
MAX_KIND = (1 << KIND_BITS) - 1

KIND_NAMES = {EQ: "EQ", LEQ: "LEQ", GT: "GT", STOP: "STOP"}
KIND_SYMBOLS = {EQ: "==", LEQ: "<=", GT: ">"}

# attribute codes
DATE_OF_BIRTH = 0

MAX_ATTRIBUTE_CODE = 0xFF

# attributes are compared as fixed-width signed integers
VALUE_BITS = 64
MIN_VALUE = -(1 << (VALUE_BITS - 1))
MAX_VALUE = (1 << (VALUE_BITS - 1)) - 1

# commitment layout: 256-bit opening secret, digest split into two 128-bit scalars
RANDOMNESS_BYTES = 32
COMMITMENT_COMPONENT_BITS = 128

# attribute schema for identity credentials
ATTRIBUTE_SCHEMA = {
    DATE_OF_BIRTH: {"name": "date_of_birth", "type": "numeric"},
}


def attribute_code(name):
    """look up the numeric code for a human-readable attribute name"""
    key = name.strip().lower().replace(" ", "_")
    for code, attr in ATTRIBUTE_SCHEMA.items():
        if attr["name"] == key:
            return code
    raise ValueError(f"unknown attribute: {name}")


def attribute_name(code):
    """look up the attribute name for a code, falling back to attr_<code>"""
    attr = ATTRIBUTE_SCHEMA.get(code)
    return attr["name"] if attr else f"attr_{code}"


def kind_name(kind):
    return KIND_NAMES.get(kind, f"KIND_{kind}")
