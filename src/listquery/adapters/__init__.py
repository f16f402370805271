"""Adapters – persistence collaborators (optional extras).

Each adapter is a sub-package that requires its optional dependency::

    pip install "listquery[sqlalchemy]"
"""
