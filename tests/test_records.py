from dcatsieve.core.records import DcatDistribution, DcatRecord, PublishableResource, coerce_record


def test_distribution_reads_dcat_json_keys():
    dist = DcatDistribution.from_mapping({"format": "CSV", "accessURL": "https://example.org/a.csv"})

    assert dist == DcatDistribution(format="CSV", access_url="https://example.org/a.csv")


def test_distribution_falls_back_to_aliases():
    dist = DcatDistribution.from_mapping(
        {"mediaType": "application/json", "downloadURL": "https://example.org/a.json"}
    )

    assert dist.format == "application/json"
    assert dist.access_url == "https://example.org/a.json"


def test_distribution_missing_values_become_empty_strings():
    dist = DcatDistribution.from_mapping({"format": None, "accessURL": 42})

    assert dist.format == ""
    assert dist.access_url == ""


def test_record_keeps_distribution_order():
    record = DcatRecord.from_mapping(
        {
            "identifier": "ds-1",
            "title": "Parks",
            "distribution": [
                {"format": "CSV", "accessURL": "a"},
                "not-a-mapping",
                {"format": "JSON", "accessURL": "b"},
            ],
        }
    )

    assert record.identifier == "ds-1"
    assert record.title == "Parks"
    assert [d.access_url for d in record.distributions] == ["a", "b"]


def test_record_accepts_single_distribution_object():
    record = DcatRecord.from_mapping({"distribution": {"format": "XML", "accessURL": "x"}})

    assert record.distributions == (DcatDistribution(format="XML", access_url="x"),)


def test_record_without_distributions_is_empty():
    assert DcatRecord.from_mapping({"title": "nothing"}).distributions == ()
    assert DcatRecord.from_mapping({"distribution": "bogus"}).distributions == ()


def test_coerce_record_passes_objects_through():
    record = DcatRecord()

    assert coerce_record(record) is record
    assert isinstance(coerce_record({"distribution": []}), DcatRecord)


def test_publishable_resource_identity_is_its_url():
    first = PublishableResource(proxy=object(), access_url="https://example.org/a")
    second = PublishableResource(proxy=object(), access_url="https://example.org/a")
    other = PublishableResource(proxy=first.proxy, access_url="https://example.org/b")

    assert first == second
    assert first is not second
    assert first != other


def test_publishable_resource_hashes_with_unhashable_proxy():
    job = {"harvest": "job"}

    resources = {
        PublishableResource(proxy=job, access_url="u"),
        PublishableResource(proxy={"harvest": "other"}, access_url="u"),
    }

    assert len(resources) == 1
    assert "harvest" not in repr(next(iter(resources)))
