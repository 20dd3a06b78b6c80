from jobboard.routers.jobs import coerce_search_query


def test_min_salary_becomes_a_number():
    assert coerce_search_query({"minSalary": "200"}) == {"minSalary": 200, "hasEquity": False}
    assert coerce_search_query({"minSalary": "2.5"})["minSalary"] == 2.5

def test_unparseable_min_salary_is_left_for_validation():
    assert coerce_search_query({"minSalary": "lots"})["minSalary"] == "lots"

def test_has_equity_is_strict():
    assert coerce_search_query({"hasEquity": "true"})["hasEquity"] is True
    assert coerce_search_query({"hasEquity": "True"})["hasEquity"] is False
    assert coerce_search_query({"hasEquity": "1"})["hasEquity"] is False
    assert coerce_search_query({})["hasEquity"] is False

def test_other_keys_pass_through():
    assert coerce_search_query({"title": "eng", "bogus": "x"}) == {
        "title": "eng", "bogus": "x", "hasEquity": False,
    }
