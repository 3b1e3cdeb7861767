"""
Layout planning for scaffolded fields.

Mutates layout coordinates only (column, order, row_key, group, removed);
binding and validation never read them.

Ordering rules:
- place() appends below what the column already holds: each field gets
  1 + the highest explicit order in its column (sentinel-ordered fields
  ignored). Fields already in a group keep their group order.
- group() numbers its fields 0, 1, 2... and restarts on every call, so
  regrouping replaces the previous ordering instead of appending.
"""

import logging
import uuid
from typing import Dict, List

from .field_selectors import FieldSelector, resolve_field
from .form_field import FULL_WIDTH, FormField

logger = logging.getLogger(__name__)


class LayoutPlannerMixin:
    """
    Layout operations for FormBuilder.

    Hosts provide _fields (name -> FormField), _groups (ordered list of
    group names) and _model_type.
    """

    _fields: Dict[str, FormField]
    _groups: List[str]

    @property
    def groups(self) -> List[str]:
        """Registered group names in first-seen order."""
        return list(self._groups)

    def _next_order(self, column: int) -> int:
        orders = [f.order for f in self._fields.values() if f.column == column and f.is_ordered]
        return max(orders, default=0)

    def place(self, *fields: FieldSelector, column: int = 0, same_row: bool = False):
        """
        Place fields in a column, below anything already placed there.

        Args:
            *fields: Field selectors
            column: Column index; FULL_WIDTH spans the form
            same_row: Render all fields of this call in one horizontal row
        """
        shared_row = uuid.uuid4() if same_row else None
        order = self._next_order(column)
        for selector in fields:
            descriptor = resolve_field(self._fields, selector, self._model_type)
            descriptor.removed = False
            descriptor.row_key = shared_row or uuid.uuid4()
            descriptor.column = column
            if descriptor.group is None:
                order += 1
                descriptor.order = order
            logger.debug(f"Placed '{descriptor.name}' at column {column}, order {descriptor.order}")
        return self

    def place_full_width(self, *fields: FieldSelector):
        return self.place(*fields, column=FULL_WIDTH)

    def group(self, name: str, *fields: FieldSelector, column: int = 0):
        """Put fields in a named section; orders restart at 0 on every call."""
        if name not in self._groups:
            self._groups.append(name)
        for order, selector in enumerate(fields):
            descriptor = resolve_field(self._fields, selector, self._model_type)
            descriptor.group = name
            descriptor.column = column
            descriptor.order = order
        logger.debug(f"Grouped {len(fields)} fields under '{name}' in column {column}")
        return self

    def remove(self, *fields: FieldSelector):
        for selector in fields:
            resolve_field(self._fields, selector, self._model_type).removed = True
        return self

    def add(self, field: FieldSelector):
        resolve_field(self._fields, field, self._model_type).removed = False
        return self

    def clear(self):
        """Mark every field removed; place() or add() brings fields back."""
        for descriptor in self._fields.values():
            descriptor.removed = True
        return self
