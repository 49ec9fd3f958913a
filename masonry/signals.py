from django.dispatch import Signal

# Sent while grid class names are assembled. Receivers get ``classes`` (a list
# to append to in place) and ``component`` (the component or None).
update_grid_class_names = Signal()
