"""Employee Application System package.

Organized by feature module (applications) with a thin Flask controller layer
on top of service/repository layers. The record store can be MySQL or an
in-process store selected by settings.
"""
