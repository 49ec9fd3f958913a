# Selectors shared with the client-side masonry engine; renaming them breaks
# matching against the rendered grid markup.
COLUMN_WIDTH_SELECTOR = ".masonry-grid-sizer"
ITEM_SELECTOR = ".masonry-grid-item"

GRID_CLASS_NAME = "masonry-grid"
