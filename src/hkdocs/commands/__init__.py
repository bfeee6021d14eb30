"""Built-in ``hkdocs`` commands.

* :mod:`~hkdocs.commands.sidebar` -- ``sidebar`` and ``paths``.
* :mod:`~hkdocs.commands.validate` -- ``validate``.
"""
