# viz/renderer_colors.py
# RGB for the pygame window
BG = (15, 15, 15)
HEAD = (60, 200, 90)
BODY = (120, 230, 140)
FOOD = (220, 70, 70)
TEXT = (230, 230, 230)
DIM = (110, 110, 110)
BORDER = (35, 35, 35)

# curses color pair ids (pair 0 is reserved for the terminal default)
PAIR_HEAD = 1
PAIR_BODY = 2
PAIR_FOOD = 3
PAIR_DIM = 4
PAIR_ALERT = 5
