import stepsynth


def test_public_names_resolve() -> None:
    for name in stepsynth.__all__:
        assert getattr(stepsynth, name) is not None
    assert isinstance(stepsynth.__version__, str)


def test_top_level_round_trip() -> None:
    sequence = stepsynth.StepSequence.from_lists([100.0], [stepsynth.SINE])
    assert len(stepsynth.synthesize(sequence, sample_rate=48_000)) == 480
