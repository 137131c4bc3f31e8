"""Example of a booking flow built on StepMachine.

The flow asks the user to accept the terms of service, then pick a date and a
time. The date and time steps skip themselves when they are already
completed, so jumping to "date" after everything is filled in lands on
"finished".

Run with:
    python examples/booking_flow.py
"""

from dataclasses import dataclass

from stepmachine import StepDefinition, StepMachine, get_logger, setup_logging

logger = get_logger(__name__)


@dataclass
class BookingState:
    """Application state the step predicates read."""

    tos_accepted: bool = False
    require_date: bool = True
    date_selected: bool = False
    time_selected: bool = False


def build_machine(state: BookingState) -> StepMachine:
    """Declare the booking steps over ``state``."""

    def enter_date(machine: StepMachine) -> None:
        if machine.completed:
            machine.go_to("time", skip_leave_current=True)
        else:
            logger.info("init_date_select")

    def enter_time(machine: StepMachine) -> None:
        if machine.completed:
            machine.go_to("finished", skip_leave_current=True)
        else:
            logger.info("init_time_select")

    return StepMachine(
        [
            StepDefinition(
                "termsOfService",
                completed_if=lambda: state.tos_accepted,
                on_enter=lambda machine: logger.info("show_tos"),
                on_leave=lambda machine: logger.info("hide_tos"),
            ),
            StepDefinition(
                "rejectedTermsOfService",
                on_enter=lambda machine: logger.info(
                    "pop_modal", text="You must accept the terms of service to continue"
                ),
            ),
            StepDefinition(
                "date",
                dependencies=["termsOfService"],
                completed_if=lambda: state.date_selected,
                on_enter=enter_date,
                on_leave=lambda machine: logger.info("tear_down_date_select"),
            ),
            StepDefinition(
                "time",
                dependencies=lambda: ["date"] if state.require_date else ["termsOfService"],
                completed_if=lambda: state.time_selected,
                on_enter=enter_time,
                on_leave=lambda machine: logger.info("tear_down_time_select"),
            ),
            StepDefinition(
                "finished",
                dependencies=lambda: ["date", "time"] if state.require_date else ["time"],
                on_enter=lambda machine: logger.info("pop_modal", text="You're finished!"),
            ),
        ]
    )


def main() -> None:
    setup_logging(level="INFO", structured=False)
    state = BookingState()
    machine = build_machine(state)

    machine.go_to("finished")
    logger.info("landed", step=machine.current_step)

    state.tos_accepted = True
    machine.go_to("finished")
    logger.info("landed", step=machine.current_step)

    state.date_selected = True
    state.time_selected = True
    machine.go_to("termsOfService")
    machine.go_to("date")
    logger.info("landed", step=machine.current_step, previous=machine.previous_step)


if __name__ == "__main__":
    main()
