# ==================================================
# two_choice_table/const.py
# ==================================================
NOT_FOUND = -1                # index sentinel for Position / Bin.find

H2_PREFIX_LEN = 3             # leading bytes of desc fed into h2
H2_WEIGHTS = (1, 27, 729)     # c0 + 27*c1 + 729*c2

DELIMITER = ","
QUOTE = '"'
DEFAULT_ENCODING = "utf-8"
DECODE_ERRORS = "surrogateescape"   # keep raw bytes of non-utf8 input

DEFAULT_TABLE_SIZES = (100000, 1000, 100)

# probe records reported after every build (upc,desc in dataset form)
PROBE_LINES = (
    "753950001954,Doctor's Best Best Curcumin C3 Complex 1000mg Tablets - 120 Ct",
    "025800024117,Weight Watchers Smart Ones Smart Creations",
    '079927020217,"Unique ""splits"" Split-open Pretzel Extra Dark"',
    "1638098830,Weleda Bar Soap Rose - 3.5 Oz",
    "895172001432,Pure Life Body Lotion Coconut And Mango - 15.0 Fl Oz",
    "995172001432,Pure Life Body Lotion Coconut And Mango - 14.9 Fl Oz",
)
