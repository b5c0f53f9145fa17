"""
selector.py

Picks the best next guess out of the allowed list.

Every allowed guess is scored independently, so the search is split into
chunks of guesses and handed to a multiprocessing pool. Each worker keeps its
own best result; the parent folds those together at the end.

Ties on the objective are broken by the composite key

    (objective, guess is not a remaining word, -frequency)

so a guess that could still be the answer beats one that cannot, and more
common words beat rarer ones.

A shared best objective lets workers abandon guesses early once their running
total passes it. It is read without waiting on other workers, so a worker may
prune with a slightly stale value. That only costs wasted work: the winner is
always decided by the final fold.
"""

import math
import multiprocessing as mp
import operator
import os
from bisect import bisect_left

from tqdm import tqdm

from wordle_solver.entropy import REDUCTIONS, guess_objective
from wordle_solver.patterns import letter_count_matrix, word_matrix


DEFAULT_CHUNK_SIZE = 64


_SELECT_WORKER_STATE = {}


def _init_select_worker(allowed, remaining, word_freqs, reduction, shared_best):
    matrix = word_matrix(remaining)
    _SELECT_WORKER_STATE["allowed"] = allowed
    _SELECT_WORKER_STATE["remaining"] = remaining
    _SELECT_WORKER_STATE["word_freqs"] = word_freqs
    _SELECT_WORKER_STATE["reduction"] = reduction
    _SELECT_WORKER_STATE["matrix"] = matrix
    _SELECT_WORKER_STATE["counts"] = letter_count_matrix(matrix)
    _SELECT_WORKER_STATE["shared_best"] = shared_best


def _update_shared_best(candidate_best):
    shared_best = _SELECT_WORKER_STATE["shared_best"]
    with shared_best.get_lock():
        # Another worker may have improved it since we last looked.
        if candidate_best < shared_best.value:
            shared_best.value = candidate_best


def _is_remaining(remaining, word):
    idx = bisect_left(remaining, word)
    return idx < len(remaining) and remaining[idx] == word


def _worker_select_chunk(task):
    start, end = task
    allowed = _SELECT_WORKER_STATE["allowed"]
    remaining = _SELECT_WORKER_STATE["remaining"]
    word_freqs = _SELECT_WORKER_STATE["word_freqs"]
    reduction = _SELECT_WORKER_STATE["reduction"]
    matrix = _SELECT_WORKER_STATE["matrix"]
    counts = _SELECT_WORKER_STATE["counts"]
    shared_best = _SELECT_WORKER_STATE["shared_best"]

    local_best = None
    pruned = 0

    for idx in range(start, end):
        guess = allowed[idx]

        local_floor = local_best[0][0] if local_best is not None else math.inf
        cutoff = min(local_floor, shared_best.value)

        total = guess_objective(guess, remaining, matrix, counts, reduction, cutoff)
        if total is None:
            pruned += 1
            continue

        key = (
            total,
            not _is_remaining(remaining, guess),
            -word_freqs.get(guess, 0.0),
        )
        if local_best is None or key < local_best[0]:
            local_best = (key, guess)
            if total < cutoff:
                _update_shared_best(total)

    return {
        "evaluated": end - start,
        "pruned": pruned,
        "local_best": local_best,
    }


def best_choice(
    allowed,
    remaining,
    word_freqs=None,
    reduction="sum",
    workers=None,
    chunk_size=DEFAULT_CHUNK_SIZE,
    progress=False,
):
    """
    Find the guess in `allowed` minimising the folded entropy over `remaining`.

    `remaining` must be sorted. `reduction` is a name from REDUCTIONS or a
    picklable two-argument callable that never decreases as terms are
    folded in.

    Returns (guess, un-normalised objective).
    """
    if not allowed:
        raise ValueError("allowed guess list is empty")
    if not remaining:
        raise ValueError("remaining word list is empty")

    reduction = REDUCTIONS.get(reduction, reduction)
    word_freqs = word_freqs if word_freqs is not None else {}
    worker_count = workers if workers is not None else (os.cpu_count() or 1)
    worker_count = max(1, int(worker_count))
    chunk_size = max(1, int(chunk_size))

    n_allowed = len(allowed)
    tasks = [
        (start, min(start + chunk_size, n_allowed))
        for start in range(0, n_allowed, chunk_size)
    ]

    start_methods = mp.get_all_start_methods()
    start_method = "fork" if "fork" in start_methods else "spawn"
    ctx = mp.get_context(start_method)
    shared_best = ctx.Value("d", math.inf)
    initargs = (allowed, remaining, word_freqs, reduction, shared_best)

    best = None
    pruned = 0

    def fold(result, pbar):
        nonlocal best, pruned
        pruned += result["pruned"]
        pbar.update(result["evaluated"])
        pbar.set_postfix({"pruned": pruned})
        local_best = result["local_best"]
        if local_best is not None and (best is None or local_best[0] < best[0]):
            best = local_best

    with tqdm(total=n_allowed, desc="Guesses", unit="word", disable=not progress) as pbar:
        if worker_count == 1 or len(tasks) == 1:
            _init_select_worker(*initargs)
            try:
                for task in tasks:
                    fold(_worker_select_chunk(task), pbar)
            finally:
                _SELECT_WORKER_STATE.clear()
        else:
            with ctx.Pool(
                processes=min(worker_count, len(tasks)),
                initializer=_init_select_worker,
                initargs=initargs,
            ) as pool:
                for result in pool.imap_unordered(_worker_select_chunk, tasks, chunksize=1):
                    fold(result, pbar)

    (objective, _, _), guess = best
    return guess, objective


def best_choice_avg(allowed, remaining, word_freqs=None, **kwargs):
    """Best guess assuming every remaining word is equally likely to be the answer."""
    guess, total = best_choice(allowed, remaining, word_freqs, operator.add, **kwargs)
    return guess, total / len(remaining)


def best_choice_adv(allowed, remaining, word_freqs=None, **kwargs):
    """Best guess assuming the answer is chosen adversarially."""
    return best_choice(allowed, remaining, word_freqs, max, **kwargs)
