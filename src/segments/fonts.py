"""
Segmented Display - Font Data
Character tables for each display kind plus sixteen-segment animation frames
"""

from .glyphs import FontTable

# Seven segments: [top, upper-right, lower-right, bottom, lower-left, upper-left, middle]
SEVEN_SEGMENT_FONT = FontTable([
    # Basic Latin
    (' ',  0x0000), ('!',  0x0030), ('"',  0x0022), ('#',  0x0000),
    ('$',  0x0000), ('%',  0x0000), ('&',  0x0000), ('\'', 0x0002),
    ('(',  0x0039), (')',  0x000F), ('*',  0x0000), ('+',  0x0000),
    (',',  0x000C), ('-',  0x0040), ('.',  0x0004), ('/',  0x0052),
    ('0',  0x003F), ('1',  0x0006), ('2',  0x005B), ('3',  0x004F),
    ('4',  0x0066), ('5',  0x006D), ('6',  0x007D), ('7',  0x0027),
    ('8',  0x007F), ('9',  0x006F), (':',  0x0048), (';',  0x0048),
    ('<',  0x0039), ('=',  0x0048), ('>',  0x000F), ('?',  0x0053),
    ('@',  0x007B), ('A',  0x0077), ('B',  0x007C), ('C',  0x0039),
    ('D',  0x005E), ('E',  0x0079), ('F',  0x0071), ('G',  0x003D),
    ('H',  0x0076), ('I',  0x0030), ('J',  0x001E), ('K',  0x0076),
    ('L',  0x0038), ('M',  0x002B), ('N',  0x0037), ('O',  0x003F),
    ('P',  0x0073), ('Q',  0x0067), ('R',  0x0077), ('S',  0x006D),
    ('T',  0x0007), ('U',  0x003E), ('V',  0x003E), ('W',  0x007E),
    ('X',  0x0076), ('Y',  0x006E), ('Z',  0x005B), ('[',  0x0039),
    ('\\', 0x0064), (']',  0x000F), ('^',  0x0023), ('_',  0x0008),
    ('`',  0x0020), ('a',  0x005F), ('b',  0x007C), ('c',  0x0058),
    ('d',  0x005E), ('e',  0x007B), ('f',  0x0071), ('g',  0x006F),
    ('h',  0x0074), ('i',  0x0010), ('j',  0x000E), ('k',  0x0076),
    ('l',  0x0006), ('m',  0x0055), ('n',  0x0054), ('o',  0x005C),
    ('p',  0x0073), ('q',  0x0067), ('r',  0x0050), ('s',  0x006D),
    ('t',  0x0078), ('u',  0x001C), ('v',  0x001C), ('w',  0x007E),
    ('x',  0x0076), ('y',  0x006E), ('z',  0x005B), ('{',  0x0046),
    ('|',  0x0030), ('}',  0x0070), ('~',  0x0040),
])

# Nine segments: the seven above plus [upper-right diagonal, lower-left diagonal]
NINE_SEGMENT_FONT = FontTable([
    # Basic Latin
    (' ',  0x0000), ('!',  0x0030), ('"',  0x0022), ('#',  0x0000),
    ('$',  0x0000), ('%',  0x0000), ('&',  0x0000), ('\'', 0x0002),
    ('(',  0x0039), (')',  0x000F), ('*',  0x0000), ('+',  0x0000),
    (',',  0x000C), ('-',  0x0040), ('.',  0x0004), ('/',  0x0180),
    ('0',  0x01BF), ('1',  0x0086), ('2',  0x005B), ('3',  0x004F),
    ('4',  0x0066), ('5',  0x006D), ('6',  0x007D), ('7',  0x0027),
    ('8',  0x007F), ('9',  0x006F), (':',  0x0048), (';',  0x0048),
    ('<',  0x0039), ('=',  0x0048), ('>',  0x000F), ('?',  0x0053),
    ('@',  0x007B), ('A',  0x0077), ('B',  0x00FD), ('C',  0x0039),
    ('D',  0x005E), ('E',  0x0079), ('F',  0x0071), ('G',  0x003D),
    ('H',  0x0076), ('I',  0x0030), ('J',  0x001E), ('K',  0x00F4),
    ('L',  0x0038), ('M',  0x00B7), ('N',  0x0037), ('O',  0x003F),
    ('P',  0x0073), ('Q',  0x013F), ('R',  0x00F5), ('S',  0x006D),
    ('T',  0x0007), ('U',  0x003E), ('V',  0x01B0), ('W',  0x013E),
    ('X',  0x0076), ('Y',  0x006E), ('Z',  0x0189), ('[',  0x0039),
    ('\\', 0x0064), (']',  0x000F), ('^',  0x0082), ('_',  0x0008),
    ('`',  0x0020), ('a',  0x005F), ('b',  0x007C), ('c',  0x0058),
    ('d',  0x005E), ('e',  0x0158), ('f',  0x0071), ('g',  0x006F),
    ('h',  0x0074), ('i',  0x0010), ('j',  0x000E), ('k',  0x00F4),
    ('l',  0x0006), ('m',  0x0154), ('n',  0x0054), ('o',  0x005C),
    ('p',  0x0073), ('q',  0x0067), ('r',  0x0050), ('s',  0x006D),
    ('t',  0x0078), ('u',  0x001C), ('v',  0x0110), ('w',  0x011C),
    ('x',  0x0076), ('y',  0x006E), ('z',  0x0148), ('{',  0x0046),
    ('|',  0x0030), ('}',  0x0070), ('~',  0x0040),
])

# Sixteen segments: split top/bottom bars, split middle bar, two verticals and four diagonals
SIXTEEN_SEGMENT_FONT = FontTable([
    # Basic Latin
    (' ',  0x0000), ('!',  0x2200), ('"',  0x0280), ('#',  0xAA3C),
    ('$',  0xAABB), ('%',  0xEE99), ('&',  0x9379), ('\'', 0x0080),
    ('(',  0x1400), (')',  0x4100), ('*',  0xDD00), ('+',  0xAA00),
    (',',  0xC000), ('-',  0x8800), ('.',  0x0020), ('/',  0x4400),
    ('0',  0x44FF), ('1',  0x040C), ('2',  0x8877), ('3',  0x883F),
    ('4',  0x888C), ('5',  0x88BB), ('6',  0x88FB), ('7',  0x2483),
    ('8',  0x88FF), ('9',  0x88BF), (':',  0x8020), (';',  0xC001),
    ('<',  0x9400), ('=',  0x8830), ('>',  0x4900), ('?',  0x2887),
    ('@',  0x28DF), ('A',  0x88CF), ('B',  0x2A3F), ('C',  0x00F3),
    ('D',  0x223F), ('E',  0x80F3), ('F',  0x80C3), ('G',  0x08FB),
    ('H',  0x88CC), ('I',  0x2233), ('J',  0x007E), ('K',  0x94C0),
    ('L',  0x00F0), ('M',  0x05CC), ('N',  0x11CC), ('O',  0x00FF),
    ('P',  0x88C7), ('Q',  0x10FF), ('R',  0x98C7), ('S',  0x093B),
    ('T',  0x2203), ('U',  0x00FC), ('V',  0x44C0), ('W',  0x50CC),
    ('X',  0x5500), ('Y',  0x2500), ('Z',  0x4433), ('[',  0x2212),
    ('\\', 0x1100), (']',  0x2221), ('^',  0x0404), ('_',  0x0030),
    ('`',  0x0100), ('a',  0xA070), ('b',  0xA0E0), ('c',  0x8060),
    ('d',  0xA260), ('e',  0xC060), ('f',  0xAA02), ('g',  0x1818),
    ('h',  0xA0C0), ('i',  0x0040), ('j',  0x2220), ('k',  0x3A00),
    ('l',  0x00E0), ('m',  0xA848), ('n',  0xA040), ('o',  0xA060),
    ('p',  0x82C1), ('q',  0xA281), ('r',  0x8040), ('s',  0x1810),
    ('t',  0xAA10), ('u',  0x2060), ('v',  0x4040), ('w',  0x5048),
    ('x',  0xD800), ('y',  0x1018), ('z',  0xC020), ('{',  0xA212),
    ('|',  0x2200), ('}',  0x2A21), ('~',  0x0A85),
])


# Sixteen-segment animation frames, pushed as raw digits

HALFWIDTH_NUMBERS = (
    0x221E, 0x000C, 0x2816, 0x081E, 0x0A0C, 0x0A1A, 0x2A1A, 0x020E,
    0x2A1E, 0x0A1E, 0x22DE, 0x00CC, 0x28D6, 0x08DE, 0x0ACC, 0x0ADA,
    0x2ADA, 0x02CE, 0x2ADE, 0x0ADE,
)

FADE_LEFT_RIGHT = (0x0000, 0x00C0, 0xC1E1, 0xE3E1, 0xFFF3, 0xFFFF)
FADE_RIGHT_LEFT = (0x0000, 0x000C, 0x1C1E, 0x3E1E, 0xFF3F, 0xFFFF)
FADE_TOP_BOTTOM = (0x0000, 0x0003, 0x0787, 0x8F87, 0xFFCF, 0xFFFF)
FADE_BOTTOM_TOP = (0x0000, 0x0030, 0x7078, 0xF878, 0xFFFC, 0xFFFF)

BLOCKS = (
    0x0000, 0x8381, 0x0E06, 0x8F87, 0xE060, 0xE3E1, 0xEE66, 0xEFE7,
    0x3818, 0xBB99, 0x3E1E, 0xBF9F, 0xF878, 0xFBF9, 0xFE7E, 0xFFFF,
)

SPINNER_1 = (
    0x02FF, 0x06FF, 0x0AFF, 0x12FF, 0x22FF, 0x42FF, 0x82FF, 0x03FF,
    0x06FF, 0x04FF, 0x0CFF, 0x14FF, 0x24FF, 0x44FF, 0x84FF, 0x05FF,
    0x0AFF, 0x0CFF, 0x08FF, 0x18FF, 0x28FF, 0x48FF, 0x88FF, 0x09FF,
    0x12FF, 0x14FF, 0x18FF, 0x10FF, 0x30FF, 0x50FF, 0x90FF, 0x11FF,
    0x22FF, 0x24FF, 0x28FF, 0x30FF, 0x20FF, 0x60FF, 0xA0FF, 0x21FF,
    0x42FF, 0x44FF, 0x48FF, 0x50FF, 0x60FF, 0x40FF, 0xC0FF, 0x41FF,
    0x82FF, 0x84FF, 0x88FF, 0x90FF, 0xA0FF, 0xC0FF, 0x80FF, 0x81FF,
    0x03FF, 0x05FF, 0x09FF, 0x11FF, 0x21FF, 0x41FF, 0x81FF, 0x01FF,
)

SPINNER_2 = (
    0x00C0, 0x0081, 0x0003, 0x0006, 0x000C, 0x0018, 0x0030, 0x0060,
    0x00C0, 0x0081, 0x0003, 0x0006, 0x000C, 0x0018, 0x0030, 0x0060,
    0x00C0, 0x0081, 0x0003, 0x0006, 0x000C, 0x0018, 0x0030, 0x0060,
    0x00C0, 0x0081, 0x0201, 0x2200, 0x2010, 0x0018,
    0x000C, 0x0006, 0x0003, 0x0081, 0x00C0, 0x0060, 0x0030, 0x0018,
    0x000C, 0x0006, 0x0003, 0x0081, 0x00C0, 0x0060, 0x0030, 0x0018,
    0x000C, 0x0006, 0x0003, 0x0081, 0x00C0, 0x0060, 0x0030, 0x0018,
    0x000C, 0x0006, 0x0202, 0x2200, 0x2020, 0x0060,
)

SPINNER_3 = (0xE3E1, 0xC7C3, 0x8F87, 0x1F0F, 0x3E1E, 0x7C3C, 0xF878, 0xF1F0)
SPINNER_4 = (0x02FF, 0x04FF, 0x08FF, 0x10FF, 0x20FF, 0x40FF, 0x80FF, 0x01FF)
SPINNER_5 = (0x8281, 0x0503, 0x0A06, 0x140C, 0x2818, 0x5030, 0xA060, 0x41C0)

ANIMATIONS = {
    'halfwidth_numbers': HALFWIDTH_NUMBERS,
    'fade_left_right': FADE_LEFT_RIGHT,
    'fade_right_left': FADE_RIGHT_LEFT,
    'fade_top_bottom': FADE_TOP_BOTTOM,
    'fade_bottom_top': FADE_BOTTOM_TOP,
    'blocks': BLOCKS,
    'spinner_1': SPINNER_1,
    'spinner_2': SPINNER_2,
    'spinner_3': SPINNER_3,
    'spinner_4': SPINNER_4,
    'spinner_5': SPINNER_5,
}
