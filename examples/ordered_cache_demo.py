"""
Ordered Cache Demo

Walks through the positional, functional and structural operations of
OrderedCache on a small inventory.
"""

import numpy as np

from ordcache import OrderedCache


def main() -> None:
    stock = OrderedCache.of(("apple", 12), ("pear", 0), ("plum", 7))
    stock.set("fig", 3).set("pear", 5)

    print(f"Stock: {stock}")
    print(f"Position of 'plum': {stock.position('plum', 'key')}")
    print(f"First item: {stock.first('key')}, last count: {stock.last()}")
    print(f"Random item: {stock.random('key', rng=np.random.default_rng(0))}")

    low = stock.filter(lambda count: count < 6)
    print(f"Low stock: {low}")

    total = stock.reduce(lambda acc, count: acc + count, "value", 0)
    print(f"Total units: {total}")

    doubled = stock.map(lambda pair: (pair[0].upper(), pair[1] * 2))
    print(f"Doubled: {doubled}")

    stock.set_at("kiwi", 9, 2).splice(4, 1)
    print(f"After set_at/splice: {stock}")

    print(f"Reversed copy: {stock.to_reversed()}")
    print(f"Equal ignoring order: {stock.equals(stock.to_reversed(), order=False)}")


if __name__ == "__main__":
    main()
