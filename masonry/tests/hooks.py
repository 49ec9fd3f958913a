"""Grid class hooks referenced from settings by the app config tests."""


def add_lightbox_class(sender, classes, component=None, **kwargs):
    classes.append("masonry-grid--lightbox")
