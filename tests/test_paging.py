import pytest

from osalgos.paging import fifo_replacement, optimal_replacement

TEXTBOOK = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1]
BELADY = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]


def test_fifo_worked_example():
    assert fifo_replacement(TEXTBOOK, 3).page_faults == 15


def test_optimal_worked_example():
    assert optimal_replacement(TEXTBOOK, 3).page_faults == 9


@pytest.mark.parametrize("algorithm", [fifo_replacement, optimal_replacement])
def test_snapshots_track_every_reference(algorithm):
    result = algorithm(TEXTBOOK, 3)
    assert len(result.snapshots) == len(TEXTBOOK)
    assert len(result.faults) == len(TEXTBOOK)
    for page, frames in zip(TEXTBOOK, result.snapshots):
        assert len(frames) == 3
        assert page in frames
    assert result.page_faults + result.hits == len(TEXTBOOK)


@pytest.mark.parametrize("algorithm", [fifo_replacement, optimal_replacement])
def test_first_reference_fills_first_frame(algorithm):
    result = algorithm(TEXTBOOK, 3)
    assert result.snapshots[0] == (TEXTBOOK[0], None, None)
    assert result.faults[0] is True


@pytest.mark.parametrize("algorithm", [fifo_replacement, optimal_replacement])
def test_enough_frames_fault_once_per_distinct_page(algorithm):
    distinct = len(set(TEXTBOOK))
    assert algorithm(TEXTBOOK, distinct).page_faults == distinct


@pytest.mark.parametrize("frames", [1, 2, 3, 4, 5])
def test_optimal_never_worse_than_fifo(frames):
    optimal = optimal_replacement(TEXTBOOK, frames).page_faults
    fifo = fifo_replacement(TEXTBOOK, frames).page_faults
    assert optimal <= fifo
    assert optimal >= len(set(TEXTBOOK))


def test_fifo_shows_belady_anomaly():
    assert fifo_replacement(BELADY, 4).page_faults > fifo_replacement(BELADY, 3).page_faults


def test_single_frame_faults_on_every_change():
    refs = [1, 1, 2, 2, 1]
    result = fifo_replacement(refs, 1)
    assert list(result.faults) == [True, False, True, False, True]
    assert [frames[0] for frames in result.snapshots] == refs


def test_repeated_page_hits():
    result = optimal_replacement([4, 4, 4], 2)
    assert result.page_faults == 1
    assert result.snapshots[-1] == (4, None)


def test_fifo_evicts_oldest():
    result = fifo_replacement([1, 2, 3], 2)
    assert result.snapshots[-1] == (3, 2)


def test_optimal_evicts_page_not_needed_again():
    result = optimal_replacement([1, 2, 3, 1], 2)
    assert result.snapshots[2] == (1, 3)
    assert result.faults[3] is False


@pytest.mark.parametrize("algorithm", [fifo_replacement, optimal_replacement])
@pytest.mark.parametrize("frames", [0, -1])
def test_rejects_bad_frame_count(algorithm, frames):
    with pytest.raises(ValueError):
        algorithm([1, 2], frames)