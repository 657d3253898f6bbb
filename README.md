# playground

A collection of small, self-contained examples: classic data structures,
sorting recipes, design patterns, a few low-level system designs and some
file and HTTP utilities. Every piece is a plain Python module that can be
imported and used on its own. Only the standard library is needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

### Data structures

- `playground.linked_list`: `DoublyLinkedList` with `insert_front`, `insert_back`,
  `remove_front` and `remove_back`. It supports `len()` and iteration. Removing
  from an empty list raises `IndexError`.
- `playground.priority_queue`: `MinPriorityQueue`, a min-heap of comparable values
  with `push`, `pop`, `peek` and `is_empty`. `pop` and `peek` on an empty queue
  raise `IndexError`.
- `playground.fifo`: `BasicQueue` (with `front`), the lock-protected
  `ConcurrentQueue` and the typed `GenericQueue`. Taking an item from an empty
  queue raises `QueueEmptyError`, which is a subclass of `IndexError`.
- `playground.stack`: `Stack`. `pop` and `peek` on an empty stack return `None`.

### Sorting

- `playground.sorting`: `Person(name, age, city)` records, sorted with `sort_by_age`,
  `sort_by_name`, `sort_by_fields` (age, name, city), `sort_by_age_and_name` and
  `sort_by_city` (stable). `sort_case_insensitive` orders words while ignoring case.
  Each function returns a new list.
- `playground.custom_sort`:
  - `custom_sorting` puts strings of odd length first, shortest first, and then
    strings of even length, longest first.
  - `custom_sorting_v2` puts strings of odd length before strings of even length.
    Both groups are ordered shortest first.
  - In both functions, strings of equal length are ordered alphabetically.

### Design patterns

- `playground.pizza`: the decorator pattern. `VeggeMania`, `CheeseTopping`,
  `TomatoTopping` and `PeepyPaneer` wrap one another. `making_steps()` lists the
  innermost step first, and `cost()` adds up the prices. `describe_pizza` returns
  the numbered steps and the total cost as text.
- `playground.guns`: the factory pattern. `get_gun("ak47")` and `get_gun("maverick")`
  build a `Gun`. Any other type raises `UnknownGunError`.
- `playground.observer`: the observer pattern. `Customer` objects register with an
  `Item`, and `Item.update_availability()` notifies every registered customer.
- `playground.payments`: the strategy pattern.
  - `CreditCardPayment` has a limit of 1000, `PayPalPayment` a limit of 500 and
    `CryptoPayment` a limit of 10000.
  - Each one records a `Transaction` for every payment and can `rollback` it.
  - `PaymentContext.execute_payment(amount, max_retries)` retries with growing
    pauses. When every attempt has failed it raises `PaymentError`.

### System designs

- `playground.atm`: `ATM`, `BankingService`, `Account`, `Card`, `CashDispenser`,
  `DepositTransaction` and `WithdrawalTransaction`. Failures raise `ATMError`, for
  example an unknown account, a low balance or too little cash in the machine.
- `playground.shopping`: `Product`, `Cart`, `Order`, `OrderItem`, `User`,
  `CreditCardPayment` and `ShoppingService`. `get_shopping_service()` returns a
  single process-wide instance.
  - `place_order` orders the cart's items that are in stock and then empties the cart.
  - It raises `ShoppingError` when nothing in the cart is available.
- `playground.car_rental`: `Car`, `Customer`, `SearchCriteria`, `Reservation`,
  payment processors and `CarRentalSystem`. `get_car_rental_system()` returns a
  single process-wide instance.
  - Reservations whose dates overlap are refused with `RentalError`.

### Utilities

- `playground.property_stats`:
  - `write_properties` writes random `name;price` lines.
  - `aggregate` collects per-name `Stat` values: minimum, maximum and average.
  - `format_stats` renders them as `{name=min/avg/max, ...}`.
  - `process_file` does all of this for a file.
- `playground.counter`: `SafeCounter`, a lock-protected count per key.
- `playground.manager`: `encode_manager` returns a `Manager` as compact JSON with
  sorted keys, in a byte stream. It also defines the `Lake`, `CreateRequest` and
  `GenericRequest` records with `to_dict`/`from_dict`.
- `playground.records_api`: clients for paged JSON record APIs.
  - `fetch_medical_records` and `fetch_food_outlets` fetch single pages.
  - `body_temperature` returns the lowest and highest body temperature that match.
  - `finest_food_outlet` returns the best-rated outlet that has enough votes.
  - The queries accept a `fetch` function in place of the network client.
- `playground.downloader`: a chunked, concurrent HTTP file downloader.
  - `plan_chunks`, `download_chunk`, `merge_chunks` and `download_large_file` handle
    byte-range downloads.
  - `download_without_ranges` is for servers that do not support byte ranges.

## Example

```python
from playground.custom_sort import custom_sorting
from playground.linked_list import DoublyLinkedList

print(custom_sorting(["a", "ab", "abc", "abcd"]))
# ['a', 'abc', 'abcd', 'ab']

items = DoublyLinkedList()
items.insert_back(1)
items.insert_back(2)
items.insert_front(0)
print(list(items))
# [0, 1, 2]
```

## Command line

The downloader asks the server for the file size and splits the file into byte
ranges. It fetches the ranges in parallel threads and merges them into one
output file:

```
playground-download URL [-o OUTPUT] [-w WORKERS] [-c CHUNK_SIZE]
```

The defaults are `downloaded-file.bin`, 5 workers and 5 MiB chunks. The command
exits with status 1 and an error message if the download fails.

## What it does not do

Only the downloader has a command. Every other module is a library to import,
and there are no demo programs. The record API clients fetch live pages from
their default service addresses unless another `base_url` or `fetch` function
is given. Nothing is stored beyond memory, apart from the files that the
downloader and `property_stats` write.