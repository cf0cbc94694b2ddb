import suite
from dgen import from_schema, Generator
from seqkit import Chain

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

schema = {
    'id': {'_qen_provider': 'sequence', 'start': 1},
    'name': 'first_name',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'tier': {'_qen_provider': 'choice', 'from': ['gold', 'silver']},
    'source': {'_qen_provider': 'literal', 'value': 'import'},
    'note': 'not a faker provider',
}


@test("from_schema generates records as a chain")
def test_from_schema_take():
    people = from_schema(schema, seed=1).take(25)
    assert_that(isinstance(people, Chain), "take returns a chain")
    rows = people.to_list()
    assert_that(len(rows) == 25, "25 records")
    assert_that([r['id'] for r in rows] == list(range(1, 26)), "sequence provider counts up")
    for r in rows:
        assert_that(18 <= r['age'] <= 65, "age in range")
        assert_that(r['tier'] in ('gold', 'silver'), "tier from the choices")
        assert_that(r['source'] == 'import', "literal provider")
        assert_that(r['note'] == 'not a faker provider', "unknown strings are literals")
        assert_that(isinstance(r['name'], str) and r['name'], "faker name")


@test("same seed gives the same records")
def test_from_schema_seeded():
    first_run = from_schema(schema, seed=99).records(10)
    second_run = from_schema(schema, seed=99).records(10)
    assert_that(first_run == second_run, "seeded generation is reproducible")


@test("generator rejects unknown providers")
def test_generator_errors():
    generator = Generator(seed=0)
    assert_raises(ValueError, generator.create, {'_qen_provider': 'nope'})
    assert_raises(ValueError, generator.create, {'_qen_provider': 'literal'})
    assert_raises(ValueError, generator.create, ('no_such_provider', {}))


if __name__ == "__main__":
    suite.main("dgen test suite")
