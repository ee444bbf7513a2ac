# Core type aliases for the J-Bob runtime.
# Runtime values are plain Python objects: int for integers, and the classes in
# jbob.types for symbols, the empty list, pairs and functions.
#
# Naming guidance:
# - SExpression: use in reader/builder code to denote raw forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; they are interchangeable.

from typing import Any

# Runtime value alias
LispValue = Any
# Forms are values too; the alias documents intent at the reader/builder seam
SExpression = LispValue
