# structural-patterns

Runnable examples of the structural design patterns. Each pattern is
modelled on a small everyday scenario:

| Module | Pattern | Scenario |
| --- | --- | --- |
| `structural_patterns.bridge` | Bridge | A `Remote` or `TVRemote` driving a `RadioDevice` or a `TVDevice` playing a `Movie` |
| `structural_patterns.composite` | Composite | A `Computer` built from `Peripherals`, a `Tower` and a `Motherboard` holding parts |
| `structural_patterns.decorator` | Decorator | `Knight` and `Archer` wrapped by `HolyKnight`, `DarkKnight` and `CrossBowArcher` |
| `structural_patterns.facade` | Facade | A `RestaurantFacade` coordinating a `Waiter`, a `Chef` and `Customer`s |
| `structural_patterns.shape_adapter` | Adapter (class) | A `ShapeAdapter` pairing a `Circle` with a `Triangle` of equal area |
| `structural_patterns.plug_adapter` | Adapter (object) | An `Adapter` deciding whether a `Plug` fits an `Outlet` |
| `structural_patterns.proxy` | Proxy | A `CreditCard` that checks the owner's details before paying from its `Cash` |

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the demonstrations

Each pattern comes with a command that walks through its scenario and
prints what happens. The commands take no options.

```
structural-bridge
structural-composite
structural-decorator
structural-facade
structural-shape-adapter
structural-plug-adapter
structural-proxy
```

Each module's `main` function can also be called directly, for example
`structural_patterns.facade.main()`.

## Using the modules

Everything is plain Python objects, and the operations return their
results as well as printing them, so the patterns can be explored
interactively.

Checking plugs against outlets (`check_plug_and_outlet` returns whether an
adapter is needed):

```python
from structural_patterns.plug_adapter import (
    american_plug,
    american_outlet,
    uk_outlet,
    check_plug_and_outlet,
)

check_plug_and_outlet(american_plug(), american_outlet())  # False
check_plug_and_outlet(american_plug(), uk_outlet())        # True
```

Driving a radio with a remote, where the volume stays between 0 and 10
and the channel between 1 and 100. `change_volume_to` and
`change_channel_to` return every value stepped through, and raise
`ValueError` for a target out of range:

```python
from structural_patterns.bridge import RadioDevice, Remote, change_volume_to

remote = Remote(RadioDevice())
remote.toggle_power(remote.device)  # True
change_volume_to(remote, 4)         # [2, 3, 4]
```

Other things to try:

- `composite.create_computer(Computer())` fills a computer with parts;
  `describe()` on any component returns its lines of description.
- The facade's steps, such as `RestaurantFacade.seats_customers`, return
  the messages they produced in order; `serve_customers` runs a whole visit
  for two customers.
- `ShapeAdapter(Circle())` holds the circle and an isosceles right
  triangle of the same area as `.circle` and `.triangle`.
- `CreditCard.pay_amount` returns 0 when the owner's details do not match
  the card on record or the card has expired.