import random
import threading

import pytest

from algosolve.h2o import H2O


def _run(order):
    h2o = H2O()
    output = []
    actions = {
        "H": lambda: h2o.hydrogen(lambda: output.append("H")),
        "O": lambda: h2o.oxygen(lambda: output.append("O")),
    }
    threads = [threading.Thread(target=actions[atom], daemon=True) for atom in order]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)
    finished = not any(thread.is_alive() for thread in threads)
    return finished, "".join(output)


def test_oxygen_first_waits_for_hydrogens():
    finished, output = _run("OHH")
    assert finished
    assert output == "HHO"


def test_hydrogens_first_still_form_molecules():
    rounds = 3
    finished, output = _run("H" * (2 * rounds) + "O" * rounds)
    assert finished
    assert output == "HHO" * rounds


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_shuffled_arrivals(seed):
    rounds = 5
    order = list("HHO" * rounds)
    random.Random(seed).shuffle(order)
    finished, output = _run(order)
    assert finished
    assert output == "HHO" * rounds
    assert output.count("H") == 2 * output.count("O")