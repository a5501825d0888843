"""Tests for the page-number and title collection sorters."""

import pytest

from docsite.exceptions import ContentValidationError
from docsite.pipeline.collections import CollectionApi, sort_by_page_number, sort_by_title


def test_sort_by_page_number_orders_ascending(make_item):
    items = [
        make_item("/guides/c/", pageNumber=3, tags=["guides"]),
        make_item("/guides/a/", pageNumber=1, tags=["guides"]),
        make_item("/guides/b/", pageNumber=2, tags="guides"),
        make_item("/plugins/x/", pageNumber=0, tags=["plugins"]),
    ]
    out = sort_by_page_number("guides")(CollectionApi(items))
    assert [i.url for i in out] == ["/guides/a/", "/guides/b/", "/guides/c/"]
    numbers = [i.data["pageNumber"] for i in out]
    assert numbers == sorted(numbers)


def test_sort_by_page_number_ties_keep_input_path_order(make_item):
    items = [
        make_item("/guides/b/", pageNumber=1, tags=["guides"]),
        make_item("/guides/a/", pageNumber=1, tags=["guides"]),
    ]
    out = sort_by_page_number("guides")(CollectionApi(items))
    assert [i.url for i in out] == ["/guides/a/", "/guides/b/"]


def test_sort_by_page_number_accepts_numeric_strings(make_item):
    items = [
        make_item("/guides/ten/", pageNumber="10", tags=["guides"]),
        make_item("/guides/two/", pageNumber=2, tags=["guides"]),
    ]
    out = sort_by_page_number("guides")(CollectionApi(items))
    assert [i.url for i in out] == ["/guides/two/", "/guides/ten/"]


def test_sort_by_page_number_keeps_fractions(make_item):
    items = [
        make_item("/guides/late/", pageNumber=1.9, tags=["guides"]),
        make_item("/guides/early/", pageNumber=1.1, tags=["guides"]),
        make_item("/guides/mid/", pageNumber="1.5", tags=["guides"]),
    ]
    out = sort_by_page_number("guides")(CollectionApi(items))
    assert [i.url for i in out] == ["/guides/early/", "/guides/mid/", "/guides/late/"]


@pytest.mark.parametrize("value", [True, "two", [1], float("nan")])
def test_sort_by_page_number_rejects_non_numbers(make_item, value):
    items = [make_item("/guides/a/", pageNumber=value, tags=["guides"])]
    with pytest.raises(ContentValidationError):
        sort_by_page_number("guides")(CollectionApi(items))


def test_sort_by_page_number_missing_number_raises(make_item):
    items = [make_item("/guides/a/", tags=["guides"])]
    with pytest.raises(ContentValidationError) as err:
        sort_by_page_number("guides")(CollectionApi(items))
    assert err.value.context["input_path"] == "guides/a.md"


def test_sort_by_title_is_case_insensitive(make_item):
    items = [
        make_item("/api/b/", pageTitle="beta", tags=["api"]),
        make_item("/api/a/", pageTitle="Alpha", tags=["api"]),
        make_item("/api/c/", pageTitle="Gamma", tags=["api"]),
        make_item("/guides/z/", pageTitle="AAA", tags=["guides"]),
    ]
    out = sort_by_title("api")(CollectionApi(items))
    assert [i.data["pageTitle"] for i in out] == ["Alpha", "beta", "Gamma"]
    keys = [i.data["pageTitle"].lower() for i in out]
    assert keys == sorted(keys)


def test_sort_by_title_missing_title_raises(make_item):
    items = [make_item("/api/a/", tags=["api"])]
    with pytest.raises(ContentValidationError):
        sort_by_title("api")(CollectionApi(items))


def test_unknown_category_gives_empty_collection(make_item):
    items = [make_item("/api/a/", pageTitle="A", tags=["api"])]
    assert sort_by_title("plugins")(CollectionApi(items)) == []
    assert sort_by_page_number("plugins")(CollectionApi(items)) == []
