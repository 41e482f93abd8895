"""What each thread does: the philosophers' routine and the monitor."""

from __future__ import annotations

import threading

from dining.simulation import (
    EATING,
    SLEEPING,
    TAKEN_FORK,
    THINKING,
    Philosopher,
    Simulation,
)

_LONE_DEATH = "died"


def eat(
    simulation: Simulation,
    philosopher: Philosopher,
    first_fork: threading.Lock,
    second_fork: threading.Lock,
) -> bool:
    """Take both forks, eat and put the forks down.

    Returns False, with every fork released, as soon as the simulation
    is found to have ended.
    """
    with first_fork:
        if not simulation.log_if_running(philosopher, TAKEN_FORK):
            return False
        with second_fork:
            if not simulation.log_if_running(philosopher, TAKEN_FORK):
                return False
            if not simulation.log_if_running(philosopher, EATING):
                return False
            philosopher.record_meal(simulation.clock())
            simulation.pause(simulation.settings.time_to_eat)
    return True


def philosopher_routine(simulation: Simulation, philosopher: Philosopher) -> None:
    """Eat, think and sleep until the simulation ends."""
    neighbour = philosopher.previous
    if neighbour is None:
        raise ValueError("philosopher is not seated at a table")
    while not simulation.has_ended():
        if philosopher.id % 2:
            simulation.pause(1)
            ate = eat(simulation, philosopher, philosopher.fork, neighbour.fork)
        else:
            ate = eat(simulation, philosopher, neighbour.fork, philosopher.fork)
        if not ate:
            return
        if not simulation.log_if_running(philosopher, THINKING):
            return
        if not simulation.log_if_running(philosopher, SLEEPING):
            return
        simulation.pause(simulation.settings.time_to_sleep)


def _starved(simulation: Simulation, philosopher: Philosopher) -> bool:
    with philosopher.meal_lock:
        if simulation.clock() - philosopher.last_meal > simulation.settings.time_to_die:
            simulation.mark_died(philosopher)
            return True
    return False


def monitor(simulation: Simulation) -> None:
    """Watch for a starved philosopher or for everyone having eaten enough."""
    must_eat = simulation.settings.must_eat
    while not simulation.has_ended():
        satisfied = 0
        for philosopher in simulation.philosophers:
            if _starved(simulation, philosopher):
                return
            if philosopher.ate_enough(must_eat):
                satisfied += 1
        if satisfied == len(simulation.philosophers):
            simulation.mark_all_ate()
            return
        simulation.pause(1)


def single_routine(simulation: Simulation, philosopher: Philosopher) -> None:
    """A philosopher alone at the table takes the only fork and dies."""
    with philosopher.fork:
        simulation.log(philosopher, TAKEN_FORK)
    simulation.log(philosopher, _LONE_DEATH)