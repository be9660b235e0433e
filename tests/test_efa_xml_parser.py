"""Tests for the EFA departure monitor XML parser."""

import pytest

from efa_departures.adapters.efa_api.xml_parser import parse_dm_response

DM_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<itdRequest version="10.2.2.48" language="de" now="2011-11-20T09:36:00" serverID="efa">
<itdDepartureMonitorRequest requestID="1">
<itdOdv type="stop" usage="dm">
<itdOdvPlace state="identified" method="itp"><odvPlaceElem omc="5113000" placeID="1">Essen</odvPlaceElem></itdOdvPlace>
<itdOdvName state="identified" method="itp"><odvNameElem stopID="20009289" anyType="stop">Hauptbahnhof</odvNameElem></itdOdvName>
</itdOdv>
<itdServingLines>
<itdServingLine number="18" symbol="18" motType="4" direction="Mülheim Hbf" key="12345">
<itdNoTrain name="Straßenbahn" />
<itdRouteDescText>Essen Hbf - Mülheim Hbf</itdRouteDescText>
</itdServingLine>
<itdServingLine number="RE1" symbol="RE1" motType="0" direction="Aachen Hbf">
<itdNoTrain name="Regional-Express" />
<itdRouteDescText>Hamm - Essen - Aachen</itdRouteDescText>
</itdServingLine>
<itdServingLine number="SEV" symbol="SEV" motType="5" direction="Kray">
</itdServingLine>
</itdServingLines>
<itdDepartureList>
<itdDeparture stopID="20009289" platform="1" platformName="Gleis 1" countdown="4">
<itdDateTime><itdDate year="2011" month="11" day="20" weekday="1" /><itdTime hour="9" minute="40" /></itdDateTime>
<itdRTDateTime><itdDate year="2011" month="11" day="20" weekday="1" /><itdTime hour="9" minute="44" /></itdRTDateTime>
<itdServingLine number="ICE 946 Intercity-Express" symbol="ICE 946" direction="Düsseldorf Hbf" key="946">
<itdNoTrain name="Intercity-Express" delay="4" />
</itdServingLine>
</itdDeparture>
<itdDeparture stopID="20009289" platform="2" platformName="Bstg. 2" countdown="6">
<itdDateTime><itdDate year="2011" month="11" day="20" weekday="1" /><itdTime hour="9" minute="42" /></itdDateTime>
<itdServingLine number="18" symbol="18" direction="Mülheim Hbf">
<itdNoTrain name="Straßenbahn" delay="-9999">Fahrt fällt aus
Bitte Ersatzverkehr nutzen</itdNoTrain>
</itdServingLine>
</itdDeparture>
<itdDeparture stopID="20009289" platform="5" countdown="12">
<itdDateTime><itdDate year="2011" month="11" day="20" weekday="1" /><itdTime hour="9" minute="48" /></itdDateTime>
<itdServingLine symbol="145" direction="Kray">
<itdNoTrain name="Bus" />
</itdServingLine>
</itdDeparture>
<itdDeparture stopID="20009289" platform="3">
<itdServingLine number="U11" direction="Messe" />
</itdDeparture>
</itdDepartureList>
</itdDepartureMonitorRequest>
</itdRequest>
""".encode()


def _odv_response(place_state: str, name_state: str, extra: str = "") -> bytes:
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<itdRequest>
<itdDepartureMonitorRequest>
<itdOdv type="stop" usage="dm">
<itdOdvPlace state="{place_state}"><odvPlaceElem>Essen</odvPlaceElem><odvPlaceElem>Essen-Kettwig</odvPlaceElem></itdOdvPlace>
<itdOdvName state="{name_state}"><odvNameElem>Hbf</odvNameElem><odvNameElem>Hbf Ost</odvNameElem></itdOdvName>
</itdOdv>
{extra}
</itdDepartureMonitorRequest>
</itdRequest>
""".encode()


class TestDepartures:
    """Tests for departure parsing."""

    def test_parses_complete_departures_in_order(self) -> None:
        """Given a response with four itdDeparture elements, when parsing, then three complete ones are kept in order."""
        result = parse_dm_response(DM_RESPONSE)

        assert result.errstr() is None
        assert [d.time for d in result.departures] == ["09:40", "09:42", "09:48"]

    def test_db_platform_and_delay(self) -> None:
        """Given a "Gleis 1" departure with delay 4, when parsing, then it is a national rail platform with delay."""
        departure = parse_dm_response(DM_RESPONSE).departures[0]

        assert departure.platform == "1"
        assert departure.platform_is_db is True
        assert departure.delay == 4
        assert departure.realtime_time == "09:44"
        assert departure.line == "ICE 946 Intercity-Express"
        assert departure.destination == "Düsseldorf Hbf"
        assert departure.line_type == "Intercity-Express"
        assert departure.countdown == 4
        assert departure.date == "20.11.2011"
        assert departure.is_cancelled is False

    def test_cancelled_departure(self) -> None:
        """Given delay -9999, when parsing, then the departure is cancelled with delay 0 and info text."""
        departure = parse_dm_response(DM_RESPONSE).departures[1]

        assert departure.is_cancelled is True
        assert departure.delay == 0
        assert departure.platform == "2"
        assert departure.platform_is_db is False
        assert departure.info == "Fahrt fällt aus\nBitte Ersatzverkehr nutzen"
        assert departure.realtime_time is None

    def test_line_falls_back_to_symbol(self) -> None:
        """Given a serving line without number, when parsing, then the symbol is the line."""
        departure = parse_dm_response(DM_RESPONSE).departures[2]

        assert departure.line == "145"
        assert departure.platform == "5"
        assert departure.delay == 0
        assert departure.info == ""


class TestLines:
    """Tests for serving line parsing."""

    def test_parses_lines_with_route(self) -> None:
        """Given itdServingLines, when parsing, then complete lines are returned in order."""
        lines = parse_dm_response(DM_RESPONSE).lines

        assert [(line.type, line.name, line.direction, line.route) for line in lines] == [
            ("Straßenbahn", "18", "Mülheim Hbf", "Essen Hbf - Mülheim Hbf"),
            ("Regional-Express", "RE1", "Aachen Hbf", "Hamm - Essen - Aachen"),
        ]


class TestErrors:
    """Tests for request-level error detection."""

    def test_ambiguous_place(self) -> None:
        """Given place state "list", when parsing, then error names the candidate places."""
        result = parse_dm_response(_odv_response("list", "identified"))

        assert result.errstr() == "ambiguous place parameter Essen Essen-Kettwig"
        assert result.departures == []

    def test_invalid_place(self) -> None:
        """Given place state "notidentified", when parsing, then error is "invalid place parameter"."""
        result = parse_dm_response(_odv_response("notidentified", "list"))

        assert result.errstr() == "invalid place parameter"

    def test_ambiguous_name(self) -> None:
        """Given name state "list", when parsing, then error names the candidate stops."""
        result = parse_dm_response(_odv_response("identified", "list"))

        assert result.errstr() == "ambiguous name parameter Hbf Hbf Ost"

    def test_invalid_name(self) -> None:
        """Given name state "notidentified", when parsing, then error is "invalid name parameter"."""
        result = parse_dm_response(_odv_response("identified", "notidentified"))

        assert result.errstr() == "invalid name parameter"

    def test_error_messages_are_joined(self) -> None:
        """Given itdMessage errors, when parsing, then their texts are joined with "; "."""
        extra = (
            '<itdMessage type="error" module="BROKER" code="-4000">no serving lines</itdMessage>'
            '<itdMessage type="info" module="BROKER" code="1">ignored</itdMessage>'
            '<itdMessage type="error" module="BROKER" code="-10">server busy</itdMessage>'
        )
        result = parse_dm_response(_odv_response("identified", "identified", extra))

        assert result.errstr() == "no serving lines; server busy"

    @pytest.mark.parametrize("content", [b"", b"<html><body>Wartung", "not xml at all"])
    def test_malformed_xml(self, content: bytes | str) -> None:
        """Given a non-XML body, when parsing, then an "invalid XML response" error is returned."""
        result = parse_dm_response(content)

        assert result.errstr() is not None
        assert result.errstr().startswith("invalid XML response")

    def test_latin1_declared_encoding(self) -> None:
        """Given an ISO-8859-1 encoded body, when parsing, then umlauts are decoded correctly."""
        content = """<?xml version="1.0" encoding="ISO-8859-1"?>
<itdRequest><itdDepartureMonitorRequest>
<itdOdv><itdOdvPlace state="identified" /><itdOdvName state="identified" /></itdOdv>
<itdDepartureList>
<itdDeparture platform="1" countdown="1">
<itdDateTime><itdDate year="2011" month="11" day="20" /><itdTime hour="9" minute="5" /></itdDateTime>
<itdServingLine number="106" direction="Hövelstraße"><itdNoTrain name="Straßenbahn" /></itdServingLine>
</itdDeparture>
</itdDepartureList>
</itdDepartureMonitorRequest></itdRequest>
""".encode("iso-8859-1")

        departure = parse_dm_response(content).departures[0]

        assert departure.destination == "Hövelstraße"
        assert departure.time == "09:05"
