"""Homepage composition: the layout document, its resolver, editor, and stores."""

from .document import LayoutDocument, LayoutEntry, LayoutRecord, MoveDirection
from .editor import EditorStatus, FieldSpec, LayoutEditor, LayoutSaveError
from .resolver import DataContext, ResolvedSection, resolve
from .store import LayoutStore, LayoutStoreError, RestLayoutStore, YamlLayoutStore

__all__ = [
    "DataContext",
    "EditorStatus",
    "FieldSpec",
    "LayoutDocument",
    "LayoutEditor",
    "LayoutEntry",
    "LayoutRecord",
    "LayoutSaveError",
    "LayoutStore",
    "LayoutStoreError",
    "MoveDirection",
    "ResolvedSection",
    "RestLayoutStore",
    "YamlLayoutStore",
    "resolve",
]
