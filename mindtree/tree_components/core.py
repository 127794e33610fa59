from enum import Enum


ROOT_ID = "root"
ROOT_TEXT = "Central Topic"
DEFAULT_NODE_TEXT = "New Node"

NODE_HEIGHT = 40
NODE_GAP_X = 200
NODE_GAP_Y = 10


class DropPosition(Enum):

    CHILD = "child"
    SIBLING = "sibling"


class Direction(Enum):

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
