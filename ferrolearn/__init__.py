"""Course models, progress storage, code running and interface helpers for a bilingual Rust course."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "compiler",
    "content",
    "db",
    "locale",
    "models",
    "navigation",
    "output",
    "playground",
    "progress_store",
    "quiz",
    "translations",
    "widgets",
]