"""
centralforge.templates - Starter Files for ``centralforge init``
================================================================

Available Templates
-------------------
Rendered with Jinja2:
    - config.properties.j2: Starter properties file

Copied verbatim (their ``{{key}}`` placeholders are filled in later by
``centralforge.renderer``, not by Jinja2):
    - pom-template.xml: Maven Central ready build descriptor
    - settings-template.xml: OSSRH server and gpg profile

Template Context
----------------
config.properties.j2 receives:

    coordinates : ProjectCoordinates
        Values collected by ``centralforge init``

    centralforge_version : str
        Version of centralforge for attribution

Usage
-----
>>> from jinja2 import Environment, PackageLoader
>>> env = Environment(loader=PackageLoader("centralforge", "templates"))
>>> source, _, _ = env.loader.get_source(env, "pom-template.xml")
"""
