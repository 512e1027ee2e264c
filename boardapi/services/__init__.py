# Services package.
#
# Each module exposes async functions that encapsulate business logic and
# database access for one aggregate:
#
#   board_service      : board CRUD, read counter, PUT/PATCH merge, ownership
#   kind_board_service : board categories
#   user_service       : user creation and lookup
#
# All service functions accept an AsyncSession as their first argument so
# that the router layer controls the transaction boundary via ``get_db``.
# Failures are raised as the exception classes in ``boardapi.exceptions``.
