import pytest

from livesplit_term.errors import RunOpenError, RunParseError
from livesplit_term.run import default_run, load_run, parse_run

LSS = """<?xml version="1.0" encoding="UTF-8"?>
<Run version="1.7.0">
  <GameName>Celeste</GameName>
  <CategoryName>Any%</CategoryName>
  <AttemptCount>42</AttemptCount>
  <Segments>
    <Segment>
      <Name>Forsaken City</Name>
      <SplitTimes>
        <SplitTime name="Personal Best"><RealTime>00:02:10.5000000</RealTime></SplitTime>
      </SplitTimes>
      <BestSegmentTime><RealTime>00:02:05.0000000</RealTime></BestSegmentTime>
    </Segment>
    <Segment>
      <Name>Old Site</Name>
      <SplitTimes>
        <SplitTime name="Personal Best" />
      </SplitTimes>
      <BestSegmentTime />
    </Segment>
  </Segments>
</Run>
"""


def test_default_run():
    run = default_run()
    assert run.game_name == "Livesplit Terminal"
    assert run.category_name == "Any%"
    assert [s.name for s in run.segments] == ["Split 1", "Split 2", "Split 3", "Split 4", "Complete!"]


def test_parse_lss():
    run = parse_run(LSS)
    assert (run.game_name, run.category_name, run.attempt_count) == ("Celeste", "Any%", 42)
    first, second = run.segments
    assert first.name == "Forsaken City"
    assert first.pb_split_time == pytest.approx(130.5)
    assert first.best_segment_time == pytest.approx(125.0)
    assert second.pb_split_time is None
    assert second.best_segment_time is None


def test_load_run_from_file(tmp_path):
    path = tmp_path / "celeste.lss"
    path.write_text(LSS, encoding="utf-8")
    assert load_run(path).game_name == "Celeste"


def test_missing_file(tmp_path):
    path = tmp_path / "nope.lss"
    with pytest.raises(RunOpenError) as e:
        load_run(path)
    assert str(e.value) == f"Unable to open {path}"


@pytest.mark.parametrize("text", [
    "not xml at all",
    "<Splits/>",
    "<Run><GameName>x</GameName><Segments/></Run>",
    "<Run><AttemptCount>many</AttemptCount><Segments><Segment><Name>a</Name></Segment></Segments></Run>",
])
def test_unparsable(tmp_path, text):
    path = tmp_path / "bad.lss"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(RunParseError) as e:
        load_run(path)
    assert str(e.value) == f"Unable to parse {path}"


def test_non_finite_time_is_a_parse_error(tmp_path):
    path = tmp_path / "inf.lss"
    path.write_text(LSS.replace("00:02:10.5000000", "00:00:inf"), encoding="utf-8")
    with pytest.raises(RunParseError):
        load_run(path)
