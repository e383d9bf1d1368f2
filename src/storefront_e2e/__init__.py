"""Page-object end-to-end suite for the demo storefront and form widgets."""

__version__ = "0.1.0"
