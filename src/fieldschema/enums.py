"""Enumeration type definitions"""

from enum import Enum


class FieldKind(str, Enum):
    """Control kinds understood by the editor's field renderer.

    ``LeafField.kind`` is a plain string so component authors can register
    custom kinds; these are the built-in ones.
    """

    OBJECT = "object"
    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    SWITCH = "switch"
    SELECT = "select"
    RADIO = "radio"
    COLOR = "color"
    SLIDER = "slider"
    UNIT = "unit"
    CODE = "code"
    ICON = "icon"
    IMAGE_UPLOAD = "imageUpload"
    ENTITY = "entity"
    SERVICE = "service"
    PAGE = "page"
    PAGES = "pages"
    GRID = "grid"
    ARRAY = "array"
    HIDDEN = "hidden"
    DIVIDER = "divider"
    SLOT = "slot"
    CUSTOM = "custom"
