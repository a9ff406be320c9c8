from highground.services.discovery.validator import PlaceRecordValidator


def _item(**overrides):
    item = {
        "id": "1",
        "name": "Ridge Top",
        "elevation": "900 ft",
        "coordinates": {"lat": 28.62, "lng": 77.21},
        "description": "A grassy ridge.",
        "risk": "Low",
        "status": "Accessible",
        "distanceFromUser": "1.1 km",
    }
    item.update(overrides)
    return item


def test_validator_builds_places_from_camel_case_items():
    places = PlaceRecordValidator().validate([_item()])

    assert len(places) == 1
    place = places[0]
    assert place.distance_from_user == "1.1 km"
    assert place.coordinates.lat == 28.62
    assert place.model_dump(by_alias=True)["distanceFromUser"] == "1.1 km"


def test_validator_normalizes_enum_case_and_numbers():
    places = PlaceRecordValidator().validate(
        [_item(risk="medium", status="CAUTION", elevation=1200, distanceFromUser=2.5)]
    )

    assert places[0].risk == "Medium"
    assert places[0].status == "Caution"
    assert places[0].elevation == "1200"
    assert places[0].distance_from_user == "2.5"


def test_validator_assigns_unique_ids():
    places = PlaceRecordValidator().validate(
        [_item(id="7"), _item(id="7"), _item(id=None)]
    )
    ids = [p.id for p in places]
    assert ids == ["7", "2", "3"]
    assert len(set(ids)) == len(ids)


def test_validator_drops_unrepairable_items():
    items = [
        "not an object",
        _item(coordinates=None),
        _item(risk="Extreme"),
        _item(id="4"),
    ]
    places = PlaceRecordValidator().validate(items)
    assert [p.id for p in places] == ["4"]


def test_missing_distance_is_allowed():
    item = _item()
    del item["distanceFromUser"]
    places = PlaceRecordValidator().validate([item])
    assert places[0].distance_from_user is None
