import suite
from dgen import from_schema
from pollect import collect, Shape
from pollect_fixtures import products, priced_products, product_schema

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


# --- where ---

@test("where matches a field with loose equality by default")
def test_where_default():
    collection = collect(products())
    assert_equal(collection.where('manufacturer', 'IKEA').all(), products()[:2])
    assert_equal(collection.all(), products())

    priced = collect(priced_products())
    assert_equal(priced.where('price', 100).all(),
                 [{'product': 'Chair', 'price': 100}, {'product': 'Door', 'price': '100'}])


@test("where with operators")
def test_where_operators():
    priced = collect(priced_products())
    assert_equal(priced.where('price', '!==', 100).all(), [
        {'product': 'Desk', 'price': 200},
        {'product': 'Bookcase', 'price': 150},
        {'product': 'Door', 'price': '100'},
    ])
    assert_equal(priced.where('price', '!=', 100).all(), [
        {'product': 'Desk', 'price': 200},
        {'product': 'Bookcase', 'price': 150},
    ])
    assert_equal(priced.where('price', '<', 100).all(), [])
    assert_equal(priced.where('price', '>=', 150).pluck('product').all(), ['Desk', 'Bookcase'])
    assert_equal(priced.where('price', '===', 100).pluck('product').all(), ['Chair'])
    assert_equal(priced.where('price', '<=', '100').pluck('product').all(), ['Chair', 'Door'])


@test("where rejects unknown operators and missing values")
def test_where_errors():
    assert_raises(ValueError, lambda: collect(priced_products()).where('price', '~', 100))
    assert_raises(ValueError, lambda: collect([]).where('price', 'like', 100), "operators are validated eagerly")
    assert_raises(TypeError, lambda: collect(priced_products()).where('price'))


@test("where accepts a callback accessor")
def test_where_callback():
    result = collect(products()).where(lambda item: item['manufacturer'][:3], 'Her')
    assert_equal(result.pluck('id').all(), [200])


@test("where keeps map keys")
def test_where_map():
    keyed = collect(products()).key_by('id')
    result = keyed.where('product', 'Chair')
    assert_that(result.shape is Shape.MAP, "where should keep the map shape")
    assert_equal(list(result.all()), ['100', '200'])


@test("where_strict compares kind and value")
def test_where_strict():
    collection = collect(priced_products())
    assert_equal(collection.where_strict('price', 100).all(), [{'product': 'Chair', 'price': 100}])
    assert_equal(collection.all(), priced_products())


# --- where_in ---

@test("where_in keeps strictly matching entries in order")
def test_where_in():
    collection = collect(products())
    assert_equal(collection.where_in('id', [150, 200]).all(), products()[1:])
    assert_equal(collection.all(), products())

    priced = collect([{'product': 'Desk', 'price': 200}, {'product': 'Chair', 'price': 100},
                      {'product': 'Bookcase', 'price': 150}, {'product': 'Door', 'price': 100}])
    assert_equal(priced.where_in('price', [100, 150]).pluck('product').all(), ['Chair', 'Bookcase', 'Door'])
    assert_equal(collect(priced_products()).where_in('price', [100]).pluck('product').all(), ['Chair'],
                 "where_in is strict")


@test("where_in_loose matches numeric strings")
def test_where_in_loose():
    data = [{'product': 'Chair', 'price': 100}, {'product': 'Desk', 'price': '100'},
            {'product': 'Lamp', 'price': 90}, {'product': 'Sofa', 'price': '200'}]
    collection = collect(data)
    assert_equal(collection.where_in_loose('price', [100, 200]).all(),
                 [data[0], data[1], data[3]])
    assert_equal(collection.all(), data)
    assert_equal(collection.where_in_loose('price', collect([90])).pluck('product').all(), ['Lamp'],
                 "candidate values may come from a collection")


# --- unique ---

@test("unique keeps first occurrences")
def test_unique():
    assert_equal(collect([1, 1, 1, 2, 3, 3]).unique().all(), [1, 2, 3])
    devices = [
        {'name': 'iPhone 6', 'brand': 'Apple', 'type': 'phone'},
        {'name': 'iPhone 5', 'brand': 'Apple', 'type': 'phone'},
        {'name': 'Apple Watch', 'brand': 'Apple', 'type': 'watch'},
        {'name': 'Galaxy S6', 'brand': 'Samsung', 'type': 'phone'},
        {'name': 'Galaxy Gear', 'brand': 'Samsung', 'type': 'watch'},
    ]
    collection = collect(devices)
    assert_equal(collection.unique('brand').all(), [devices[0], devices[3]])
    assert_equal(collection.unique(lambda item: item['brand'] + item['type']).all(),
                 [devices[0], devices[2], devices[3], devices[4]])
    assert_equal(collection.all(), devices)


@test("unique compares strictly")
def test_unique_strict():
    assert_equal(collect([1, '1', True, 1.0, None, None]).unique().all(), [1, '1', True, None])
    assert_equal(collect([[1], [1], {'a': 1}, {'a': 1}]).unique().all(), [[1], {'a': 1}],
                 "unhashable values are compared too")


@test("unique keeps map keys")
def test_unique_map():
    assert_equal(collect({'a': 1, 'b': 1, 'c': 2}).unique().all(), {'a': 1, 'c': 2})


# --- diff / intersect / diff_keys ---

@test("diff keeps values missing from the other")
def test_diff():
    collection = collect([1, 2, 3, 4, 5])
    assert_equal(collection.diff([1, 2, 3, 9]).all(), [4, 5])
    assert_equal(collection.all(), [1, 2, 3, 4, 5])
    assert_equal(collection.diff(['1', '2']).all(), [1, 2, 3, 4, 5], "diff is strict")


@test("intersect keeps values present in the other")
def test_intersect():
    collection = collect([1, 2, 3, 4, 5])
    assert_equal(collection.intersect([1, 2, 3, 9]).all(), [1, 2, 3])
    assert_equal(collection.intersect(collect([1, 2, 3, 9])).all(), [1, 2, 3])
    assert_equal(collect({'a': 1, 'b': 2}).intersect({'z': 2}).all(), {'b': 2}, "receiver keys are kept")


@test("diff_keys compares keys")
def test_diff_keys():
    data = {'a': 'a', 'b': 'b', 'c': 'c', 'd': 'd'}
    collection = collect(data)
    assert_equal(collection.diff_keys({'b': 'b', 'd': 'd'}).all(), {'a': 'a', 'c': 'c'})
    assert_equal(collection.all(), data)
    assert_equal(collect({1: 'x', 2: 'y'}).diff_keys(collect({'1': 'z'})).all(), {'2': 'y'})


# --- only / except_ ---

@test("only projects the named keys")
def test_only():
    collection = collect(products()[0])
    assert_equal(collection.only(['id', 'product']).all(), {'id': 100, 'product': 'Chair'})
    assert_equal(collection.only(['product', 'id']).all(), {'id': 100, 'product': 'Chair'},
                 "receiver order is kept")
    assert_equal(collection.only('id').all(), {'id': 100})
    assert_equal(collection.all(), products()[0])


@test("except_ drops the named keys")
def test_except():
    assert_equal(collect(products()[0]).except_(['id', 'product']).all(),
                 {'manufacturer': 'IKEA', 'price': '1490 NOK'})


@test("only and except_ need a map")
def test_projection_shape():
    assert_raises(TypeError, lambda: collect([1, 2]).only([0]))
    assert_raises(TypeError, lambda: collect([1, 2]).except_([0]))


@test("where over generated records agrees with a comprehension")
def test_where_generated():
    records = from_schema(product_schema, seed=3).records(40)
    expected = [record for record in records if record['manufacturer'] == 'IKEA' and record['price'] > 500]
    actual = collect(records).where('manufacturer', 'IKEA').where('price', '>', 500).all()
    assert_equal(actual, expected)


if __name__ == "__main__":
    raise SystemExit(0 if suite.run(title="pollect filtering test suite") else 1)
