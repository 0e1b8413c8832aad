"""Domain layer for pocketbook application.

Services are imported from their own modules (``pocketbook.domain.income``
and so on) so that the database layer can import entities without pulling
the services in.
"""
