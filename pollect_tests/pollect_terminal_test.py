import numpy as np
import pandas as pd
import suite
from dgen import from_schema
from pollect import collect, empty, Shape
from pollect_fixtures import products, player, product_schema

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal


# --- plain conversions ---

@test("to_list gives the values of either shape")
def test_to_list():
    assert_equal(collect(player()).to_list(), ['Steven Gerrard', 8])
    listed = collect([1, 2])
    values = listed.to_list()
    values.append(3)
    assert_equal(listed.all(), [1, 2], "to_list hands out a copy")


@test("to_dict keys lists by position")
def test_to_dict():
    assert_equal(collect(['a', 'b']).to_dict(), {0: 'a', 1: 'b'})
    assert_equal(collect(player()).to_dict(), player())


@test("all returns the live backing data")
def test_all_is_live():
    collection = collect([1, 2])
    collection.push(3)
    assert_equal(collection.all(), [1, 2, 3])


@test("to_json encodes numpy scalars")
def test_to_json_numpy():
    assert_equal(collect([np.int64(3), np.float64(1.5)]).to_json(), '[3,1.5]')
    assert_equal(collect({'tags': {'a'}}).to_json(), '{"tags":["a"]}')


# --- pandas ---

@test("to_series keeps values and map keys")
def test_to_series():
    series = collect([1, 2, 3]).to_series()
    assert_that(isinstance(series, pd.Series), "should build a pandas series")
    assert_equal(series.tolist(), [1, 2, 3])
    keyed = collect(player()).to_series()
    assert_equal(list(keyed.index), ['name', 'number'])
    assert_equal(keyed['number'], 8)
    assert_equal(len(empty().to_series()), 0)


@test("to_frame lays records out as rows")
def test_to_frame():
    frame = collect(products()).to_frame()
    assert_that(isinstance(frame, pd.DataFrame), "should build a pandas dataframe")
    assert_equal(list(frame.columns), ['id', 'product', 'manufacturer', 'price'])
    assert_equal(frame['product'].tolist(), ['Chair', 'Desk', 'Chair'])
    keyed = collect(products()).key_by('id').to_frame()
    assert_equal(list(keyed.index), ['100', '150', '200'])


@test("generated records survive a frame round trip")
def test_frame_generated():
    records = from_schema(product_schema, seed=8).take(12)
    frame = records.to_frame()
    assert_equal(len(frame), 12)
    assert_equal(int(frame['price'].sum()), records.sum('price'))
    assert_equal(frame['id'].tolist(), records.pluck('id').all())


# --- generated fixtures ---

@test("keyed fixtures are map-shaped")
def test_keyed_fixture():
    keyed = from_schema(product_schema, seed=2).keyed(5, 'id')
    assert_that(keyed.shape is Shape.MAP, "keyed() builds a map")
    assert_equal(keyed.keys().all(), ['100', '150', '200', '250', '300'])
    for key, record in keyed.to_dict().items():
        assert_equal(key, str(record['id']))


@test("seeded fixtures are reproducible")
def test_seeded_fixtures():
    first = from_schema(product_schema, seed=4).records(6)
    second = from_schema(product_schema, seed=4).records(6)
    assert_equal(first, second)


if __name__ == "__main__":
    raise SystemExit(0 if suite.run(title="pollect conversion test suite") else 1)
