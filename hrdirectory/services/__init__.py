"""
Service layer package.

Routes and CLI commands never talk to a storage connection directly;
they go through the facade registry, usually by way of a command::

    from hrdirectory.services.commands import GetOrgInfoCommand
    from hrdirectory.services.facade_registry import current_registry

    GetOrgInfoCommand(org_id=1).execute(current_registry())
"""
