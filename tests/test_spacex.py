"""Tests for the SpaceX client with mocked HTTP."""

from __future__ import annotations

import json

import pytest
import requests
import responses

from launchcatalog.config import SPACEX_API_URL
from launchcatalog.errors import SyncError
from launchcatalog.fetch.spacex import SpaceXClient, normalize_launch_doc
from launchcatalog.models import SpaceXLaunchDoc


def test_normalize_flattens_customers_in_payload_order(spacex_doc):
    doc = SpaceXLaunchDoc.model_validate(
        spacex_doc(12, "CRS-1", payload_customers=[["A", "B"], ["C"]])
    )

    launch = normalize_launch_doc(doc)

    assert launch.customers == ["A", "B", "C"]


def test_normalize_keeps_duplicate_customers(spacex_doc):
    doc = SpaceXLaunchDoc.model_validate(
        spacex_doc(30, "Iridium NEXT", payload_customers=[["Iridium"], ["Iridium"]])
    )
    assert normalize_launch_doc(doc).customers == ["Iridium", "Iridium"]


def test_normalize_maps_fields(spacex_doc):
    doc = SpaceXLaunchDoc.model_validate(
        spacex_doc(1, "FalconSat", rocket="Falcon 1", payload_customers=[["DARPA"]], success=False)
    )

    launch = normalize_launch_doc(doc)

    assert launch.flight_number == 1
    assert launch.mission == "FalconSat"
    assert launch.rocket == "Falcon 1"
    assert launch.launch_date.year == 2006
    assert launch.upcoming is False
    assert launch.success is False
    assert launch.target is None


def test_normalize_without_payloads(spacex_doc):
    doc = SpaceXLaunchDoc.model_validate(spacex_doc(200, "Crew-9", upcoming=True, success=None))
    launch = normalize_launch_doc(doc)
    assert launch.customers == []
    assert launch.success is None


@responses.activate
def test_fetch_posts_unpaginated_populated_query(spacex_doc):
    responses.add(
        responses.POST,
        SPACEX_API_URL,
        json={"docs": [spacex_doc(1, "FalconSat", rocket="Falcon 1")], "totalDocs": 1},
        status=200,
    )

    docs = SpaceXClient().fetch_launch_docs()

    assert [d.name for d in docs] == ["FalconSat"]
    body = json.loads(responses.calls[0].request.body)
    assert body["options"]["pagination"] is False
    assert {p["path"] for p in body["options"]["populate"]} == {"rocket", "payloads"}


@responses.activate
def test_fetch_non_200_raises():
    responses.add(responses.POST, SPACEX_API_URL, json={"error": "down"}, status=503)

    with pytest.raises(SyncError, match="503"):
        SpaceXClient().fetch_launch_docs()


@responses.activate
def test_fetch_no_documents_raises():
    responses.add(responses.POST, SPACEX_API_URL, json={"docs": []}, status=200)

    with pytest.raises(SyncError, match="no documents"):
        SpaceXClient().fetch_launch_docs()


@responses.activate
def test_fetch_connection_error_raises():
    responses.add(
        responses.POST, SPACEX_API_URL, body=requests.ConnectionError("refused")
    )

    with pytest.raises(SyncError):
        SpaceXClient().fetch_launch_docs()


@responses.activate
def test_fetch_malformed_document_raises():
    responses.add(
        responses.POST,
        SPACEX_API_URL,
        json={"docs": [{"flight_number": 1, "name": "FalconSat"}]},
        status=200,
    )

    with pytest.raises(SyncError, match="shape"):
        SpaceXClient().fetch_launch_docs()


@responses.activate
def test_fetch_body_not_an_object_raises():
    responses.add(responses.POST, SPACEX_API_URL, json=[{"x": 1}], status=200)

    with pytest.raises(SyncError, match="shape"):
        SpaceXClient().fetch_launch_docs()


@responses.activate
def test_fetch_missing_docs_key_raises():
    responses.add(responses.POST, SPACEX_API_URL, json={"totalDocs": 0}, status=200)

    with pytest.raises(SyncError, match="no documents"):
        SpaceXClient().fetch_launch_docs()
