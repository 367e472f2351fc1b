"""Migration version modules.

Each module in this package defines one schema change and exposes it
through a ``migration()`` function returning a ``Migration``. Modules are
named ``m<YYYYMMDD>_<description>.py`` after their version and must be
listed in ``registry.all_migrations()``.

Example migration (m20260201_add_accounts.py):
    from ..registry import Migration

    def migration() -> Migration:
        return Migration(
            version=20260201,
            description="add accounts table",
            sql=SQL,
        )
"""
