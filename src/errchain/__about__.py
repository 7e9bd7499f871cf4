__version__ = "0.1.0"
__author__ = "PsiACE"
__author_email__ = "psiace@apache.org"
__copyright__ = f"Copyright (c) 2026, {__author__}."
__docs__ = "Structured, chainable errors with operations, kinds and severities."

__all__ = [
    "__author__",
    "__author_email__",
    "__copyright__",
    "__docs__",
    "__version__",
]
