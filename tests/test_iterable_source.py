from dcatsieve.core.adaptor import DcatIteratorAdaptor
from dcatsieve.core.interfaces import ClosableSource, RecordSource
from dcatsieve.core.records import DcatRecord
from dcatsieve.sources.iterable_source import IterableRecordSource


def _dataset(*pairs):
    return {"distribution": [{"format": f, "accessURL": u} for f, u in pairs]}


def test_mappings_are_coerced_to_records():
    source = IterableRecordSource([_dataset(("CSV", "a"))])

    records = list(source.iter_records())

    assert len(records) == 1
    assert isinstance(records[0], DcatRecord)
    assert records[0].distributions[0].access_url == "a"


def test_coercion_can_be_disabled():
    raw = _dataset(("CSV", "a"))
    source = IterableRecordSource([raw], coerce=False)

    assert list(source.iter_records()) == [raw]


def test_cursor_is_shared_and_forward_only():
    source = IterableRecordSource([_dataset(("CSV", "a")), _dataset(("CSV", "b"))])

    first = source.iter_records()
    next(first)
    rest = list(source.iter_records())

    assert [r.distributions[0].access_url for r in rest] == ["b"]
    assert list(source.iter_records()) == []


def test_close_closes_wrapped_generator_once():
    closed = []

    def gen():
        try:
            yield _dataset(("JSON", "a"))
            yield _dataset(("JSON", "b"))
        finally:
            closed.append(True)

    source = IterableRecordSource(gen())
    cursor = source.iter_records()
    next(cursor)

    source.close()
    source.close()

    assert source.closed
    assert closed == [True]
    assert list(source.iter_records()) == []


def test_satisfies_source_protocols():
    source = IterableRecordSource([])

    assert isinstance(source, RecordSource)
    assert isinstance(source, ClosableSource)


def test_adaptor_over_generator_is_lazy_and_closes_feed():
    produced = []

    def feed():
        for idx in range(5):
            produced.append(idx)
            yield _dataset(("json", f"u{idx}"))

    source = IterableRecordSource(feed())
    adaptor = DcatIteratorAdaptor("json", None, source)
    it = iter(adaptor)

    assert it.has_next()
    assert it.take().access_url == "u0"
    assert produced == [0]

    adaptor.close()

    assert source.closed
    assert list(it) == []
    assert list(adaptor) == []
