from tripshare.core.ids import canonical_id, is_object_id, new_object_id


def test_new_ids_are_unique_and_well_formed():
    ids = [new_object_id() for _ in range(1000)]
    assert len(set(ids)) == len(ids)
    assert all(is_object_id(i) for i in ids)


def test_ids_sort_by_creation_time():
    ids = [new_object_id() for _ in range(50)]
    stamps = [i[:8] for i in ids]
    assert stamps == sorted(stamps)


def test_is_object_id_rejects_garbage():
    assert not is_object_id("badid")
    assert not is_object_id("Z" * 24)
    assert not is_object_id(None)
    assert not is_object_id(12)


def test_uppercase_ids_resolve_to_stored_form():
    value = "507F1F77BCF86CD799439011"
    assert is_object_id(value)
    assert canonical_id(value) == "507f1f77bcf86cd799439011"
    assert canonical_id("badid") is None
