# relquery

This package provides building blocks for relational queries over in-memory
tables of unsigned 64-bit integers. It can:

- load binary relation files and query batches,
- filter the rows of a relation with comparison predicates,
- join key-sorted tables with a sort-merge join,
- filter results whose relations have already been joined together.

An intermediate result is kept as lists of row ids, one list for each
relation that takes part in a query.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `relquery.bucketlist`
  - `Bucket` is a fixed number of slots. Its `delete` moves the last item
    into the freed slot.
  - `BucketList` stores its items in buckets of `bucket_size // data_size`
    slots each. It offers `append`, `delete_bucket`, `delete_last_bucket`,
    `first`, `last`, `buckets` and `total_buckets`.
  - `extend_from` (also `+=`) moves every item of another list onto the end
    of this one and leaves the other list empty.
- `relquery.minivector`
  - `MiniVector` is a growable vector whose capacity doubles when it is full.
  - It offers `push_back`, `remove`, `remove_many`, `reserve` and `reverse`.
- `relquery.hashmap`
  - `HashMap` is a fixed-size, open-addressing map with linear probing.
  - `set` raises `KeyError` for a key that is already present. It raises
    `HashMapFullError` when the key cannot be placed.
  - `get` and `delete_key` raise `KeyError` for a missing key.
  - Other members: `load`, `hashed_value`, `array_index` and `items`.
- `relquery.structs`
  - Record types: `Stats`, `RelationTable`, `JoinPred`, `CompPred`,
    `Projection`, `Query`, `ResStruct`, `FullResList` and `MergeTuple`.
  - A `RelationTable` stores its data column by column (`table[col][row]`).
    It exposes `rows` and `cols`.
- `relquery.bloom`
  - `BloomFilter` has `add` and supports `in`.
  - The 32-bit hash functions are `djb2`, `sdbm` and `super_fast_hash`.
  - `count_distinct` counts the values the filter first reported as new and
    did not see again.
- `relquery.joins`
  - `merge_tables` joins two key-sorted `MergeTuple` sequences. It returns
    the matching row id pairs packed into 64-bit integers.
  - Helpers: `pack_row_ids`, `unpack_row_ids`, `bit_conversion`,
    `switch_elements` and `raise_to_power`.
- `relquery.loader`
  - `read_relation` and `read_relations` load binary relation files.
    `read_relations` skips blank names and sets each relation's `table_id`
    to its position.
  - `parse_query` parses a single query line.
  - `iter_query_batches` yields the batches of a query file as lists of
    `Query`.
- `relquery.predicates`
  - `comparison_predicate` and `do_all_comp_preds` filter the rows of a
    relation.
  - `find_in_res_list` and `find_in_res_vec` look up a relation in an
    intermediate result.
  - `delete_targeted_sl` and `delete_targeted` rebuild row id lists from
    packed join pairs.
- `relquery.joinpreds`
  - `join_self` keeps the rows of one relation where two columns hold equal
    values.
  - `join_in_same_bucket` filters a `FullResList` by a join between two
    relations it already holds.

## File formats

A relation file begins with two little-endian unsigned 64-bit integers: the
row count, then the column count. All the values follow, stored one column
after another.

A query line has three parts separated by `|`:

```
0 2 4|0.1=1.2&1.0=2.1&0.1>3000|0.0 1.1
```

1. The relations the query uses, given as indexes into the loaded relations.
2. The predicates, joined by `&`. Each predicate is either a join `a.c=b.d`
   or a comparison `a.c=N`, `a.c<N` or `a.c>N`.
3. The projections, written as `rel.col`.

A line holding only `F` ends a batch. Any queries after the last `F` are
dropped.

## Example

```python
from relquery.joins import merge_tables, unpack_row_ids
from relquery.structs import MergeTuple

left = [MergeTuple(key=1, row_id=0), MergeTuple(key=3, row_id=1)]
right = [MergeTuple(key=3, row_id=7)]
for entry in merge_tables(left, right):
    print(unpack_row_ids(entry))   # (1, 7)
```

## What the package does not do

- There is no command-line program and no query driver. Nothing runs a whole
  batch from start to finish or computes projection sums.
- A join between two relations held in different intermediate results must
  be assembled by the caller. The package provides the pieces for it:
  `merge_tables`, `delete_targeted` and `delete_targeted_sl`. It provides no
  single function that sorts, merges and fuses the results.
- Column statistics are only a record type (`Stats`). They are not computed,
  and nothing chooses a join order from them.
- All work runs in a single thread.