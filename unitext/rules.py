"""
Fixed normalization tables.

This file exists to keep presets and character maps in one reviewable place.
"""

# Named normal forms and the option record each one expands to
NORMAL_FORMS = {
    "NFC": {"stable": True, "compose": True},
    "NFD": {"stable": True, "compose": False, "decompose": True},
    "NFKC": {"stable": True, "compose": True, "compat": True},
    "NFKD": {"stable": True, "compose": False, "decompose": True, "compat": True},
}

DEFAULT_FORM = "NFC"

# Characters that are both easily confused and easily typed by accident,
# canonicalized in identifiers.
CONFUSABLE_MAP = {
    0x025B: 0x03B5,  # latin small letter open e -> greek small letter epsilon
    0x00B5: 0x03BC,  # micro sign -> greek small letter mu
    0x00B7: 0x22C5,  # middle dot -> dot operator
    0x0387: 0x22C5,  # greek ano teleia -> dot operator
    0x2212: 0x002D,  # minus sign -> hyphen-minus
    0x210F: 0x0127,  # planck constant over two pi -> latin small letter h with stroke
}

# Look-alike punctuation folded onto ASCII when lumping. Space separators,
# dashes and connector punctuation are lumped by category.
LUMP_MAP = {
    0x2018: 0x0027,  # left single quotation mark
    0x2019: 0x0027,  # right single quotation mark
    0x02BC: 0x0027,  # modifier letter apostrophe
    0x02C8: 0x0027,  # modifier letter vertical line
    0x2212: 0x002D,  # minus sign
    0x2044: 0x002F,  # fraction slash
    0x2215: 0x002F,  # division slash
    0x2236: 0x003A,  # ratio
    0x2039: 0x003C,  # single left-pointing angle quotation mark
    0x2329: 0x003C,  # left-pointing angle bracket
    0x3008: 0x003C,  # left angle bracket
    0x203A: 0x003E,  # single right-pointing angle quotation mark
    0x232A: 0x003E,  # right-pointing angle bracket
    0x3009: 0x003E,  # right angle bracket
    0x2216: 0x005C,  # set minus
    0x02C4: 0x005E,  # modifier letter up arrowhead
    0x02C6: 0x005E,  # modifier letter circumflex accent
    0x2038: 0x005E,  # caret
    0x2303: 0x005E,  # up arrowhead
    0x02CD: 0x005F,  # modifier letter low macron
    0x02CB: 0x0060,  # modifier letter grave accent
    0x2223: 0x007C,  # divides
    0x223C: 0x007E,  # tilde operator
}

# Simple (one to one) case mappings from UnicodeData.txt for characters whose
# full mapping in SpecialCasing.txt expands to several characters. Everything
# else in SpecialCasing.txt has no simple mapping and is left unchanged.
SIMPLE_LOWER_MAP = {
    0x0130: 0x0069,  # latin capital letter i with dot above
}

SIMPLE_UPPER_MAP = {
    **{cp: cp + 8 for cp in range(0x1F80, 0x1F88)},  # alpha with ypogegrammeni
    **{cp: cp + 8 for cp in range(0x1F90, 0x1F98)},  # eta with ypogegrammeni
    **{cp: cp + 8 for cp in range(0x1FA0, 0x1FA8)},  # omega with ypogegrammeni
    0x1FB3: 0x1FBC,
    0x1FC3: 0x1FCC,
    0x1FF3: 0x1FFC,
}

MAX_UPLOAD_BYTES = 5 * 1024 * 1024
