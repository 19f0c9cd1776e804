# Services package.
#
#   article_service: list / get / create / partial update / delete for
#                    Article, with validation and sanitisation
#
# Service functions take an ``ArticleStore`` as their first argument; the
# store wraps the request's AsyncSession, so the router layer still controls
# the transaction boundary via the ``get_db`` dependency.
