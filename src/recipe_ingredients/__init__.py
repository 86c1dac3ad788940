"""Recipe Ingredients - service layer for ingredients nested in recipes."""

from .utils.constants import APP_VERSION

__version__ = APP_VERSION
