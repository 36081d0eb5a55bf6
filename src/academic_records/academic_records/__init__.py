"""Academic records package.

Organized by feature modules (grades, attendance, curriculum, finance, ...)
with pure calculators/resolvers, service layers over repository protocols and
a thin read-only Flask controller layer.
"""
