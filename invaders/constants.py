"""
Arcade cabinet constants (pixels, pixels/frame)
"""

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

PLAYER_WIDTH = 40
PLAYER_HEIGHT = 30
ENEMY_WIDTH = 30
ENEMY_HEIGHT = 30
BULLET_WIDTH = 4
BULLET_HEIGHT = 12

PLAYER_SPEED = 5
BULLET_SPEED = 7
ENEMY_BULLET_SPEED = 4

# Formation layout
ENEMY_SPACING_X = 60
ENEMY_SPACING_Y = 50
FORMATION_TOP = 80
FORMATION_CENTER_X = SCREEN_WIDTH / 2
CIRCLE_CENTER_Y = 150
EDGE_MARGIN = 10

PLAYER_START_X = SCREEN_WIDTH / 2 - PLAYER_WIDTH / 2
PLAYER_START_Y = SCREEN_HEIGHT - 80
PLAYER_LIVES = 3

# Colors (RGB)
PLAYER_COLOR = (0, 255, 0)
ENEMY_COLORS = {
    0: (255, 0, 0),
    1: (255, 128, 0),
    2: (255, 255, 0),
    3: (128, 255, 0),
}
PLAYER_BULLET_COLOR = (0, 255, 255)
ENEMY_BULLET_COLOR = (255, 0, 255)
