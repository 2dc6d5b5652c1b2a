"""Update model, grouping and serialization."""

from .models import Group, Single, Update, name_of, remove_common_suffix

__all__ = ["Group", "Single", "Update", "name_of", "remove_common_suffix"]
