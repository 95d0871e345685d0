# bubbme

Data access and business rules behind the Bubbme administration back
office.

The package has two layers:

* **Repositories** run SQL against a DB-API connection and return plain
  dataclass records. The SQL uses `?` placeholders and the `NOW()`
  function, so the driver and database must accept both.
* **Use cases** sit on top of the repositories. They fill in who made a
  change and when, log failures, and wrap results in a `Response`.

## Modules

| Module | What it holds |
| --- | --- |
| `bubbme.storage` | `AuthorizationRepository` (`get_user`, `update_is_login`) for administrator log-in, `AdminCredentials`, `NoRowsError`, and the shared helpers `transaction`, `search_clause` and `page_params` |
| `bubbme.cms.catalog_repository` | `CatalogEntry`, `CatalogRepository` and the factories `coin_source_repository`, `item_type_repository`, `pet_status_repository`, `point_source_repository` |
| `bubbme.cms.ledger_repository` | `Item`, `ItemRepository`, `UserBalance`, `BalanceRepository`, `user_coin_repository`, `user_point_repository` |
| `bubbme.cms.mood_repository` | `Mood`, `MoodRepository` |
| `bubbme.cms.account_repository` | `AppUser`, `AppUserRepository`, `AdminUser`, `AdminUserRepository` |
| `bubbme.cms.catalog_usecase` | `CatalogUsecase`, `Response`, `parse_actor_id` |
| `bubbme.cms.ledger_usecase` | `ItemUsecase`, `BalanceUsecase`, `ItemRequest`, `BalanceRequest` |
| `bubbme.cms.account_usecase` | `AppUserUsecase`, `AdminUserUsecase`, `AppUserRequest`, `AdminUserRequest`, `PhoneExistsError`, `EmailRegisteredError` |
| `bubbme.task` | `Task`, `TaskRepository`, `TaskUsecase` |

## Behaviour worth knowing

* Every `list` takes `page`, `limit` and `search`. Pages start at 1. An
  empty search string matches everything.
* `count` takes the search string on catalog, item and balance
  repositories. Moods, application users and administrators are always
  counted in full.
* `update` writes only the fields that are set (non-empty, non-zero) and
  always stamps `updated_at`. `AppUserRepository.update` always writes
  the verification flag and the editor's id.
* Writes run in `transaction`. It commits when the block succeeds and
  rolls back when it raises.
* Look-ups that find no row raise `NoRowsError`. Creating an application
  user with a phone number already in use raises `PhoneExistsError`.
  Creating an administrator with an e-mail already registered raises
  `EmailRegisteredError`.
* `parse_actor_id` turns the acting administrator's id into an int. It
  returns 0 for anything it cannot parse.
* `AdminUserUsecase` takes a `hash_password` callable. The package does
  not hash passwords itself.
* `TaskRepository` stores nothing: `create` accepts a task and
  `fetch_by_user_id` always returns an empty list.

## Example

```python
from bubbme.cms.catalog_repository import coin_source_repository
from bubbme.cms.catalog_usecase import CatalogUsecase

usecase = CatalogUsecase(coin_source_repository(connection))

usecase.create("Daily login", actor_id="1")
response = usecase.list(page=1, limit=10, search="login")
print(response.message, response.total, response.data)
```

`connection` is any DB-API connection that already holds the back-office
tables.

## What this package does not do

* It has no HTTP server, routes or command-line entry point. Call the use
  cases from your own application.
* It does not create tables or run migrations.
* It does not issue or check access tokens.
* It has nothing for the app side: no sign-up, OTP cache, app log-in or
  diary storage for app users.
* It has no back-office diary repository.
* `MoodRepository` has no matching use case. Use the repository directly.

## Tests

The tests use pytest. Install the `test` extra, then run:

```
pytest
```