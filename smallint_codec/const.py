# ==================================================
# smallint_codec/const.py
# ==================================================
DOMAIN_MIN = 1
DOMAIN_MAX = 300          # inclusive; bitmap covers 1..300

BITMAP_BITS = 304         # DOMAIN_MAX rounded up to a whole byte
BITMAP_SIZE = BITMAP_BITS // 8   # 38 bytes, last 4 bits are padding (always 0)

VARINT_PAYLOAD  = 0x7F    # low 7 bits carry data
VARINT_CONTINUE = 0x80    # high bit set = another group follows
VARINT_SHIFT    = 7

TAG_DELTA  = "D"          # delta + varint payload
TAG_BITMAP = "B"          # fixed 38-byte bitmap payload
