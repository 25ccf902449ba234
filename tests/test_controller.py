import copy
import unittest

from routine_player.controller import RoutinePlayerController
from routine_player.model import (
    MIN_DURATION,
    MIN_TRANSITION,
    PhaseKind,
    Pose,
    PosePhase,
    Routine,
    RoutineCatalog,
    RoutinePlayerModel,
    TransitionPhase,
)


def _catalog() -> RoutineCatalog:
    return RoutineCatalog(
        [
            Routine(
                "flow",
                "Flow",
                poses=[Pose("a", "A", 30), Pose("b", "B", 40), Pose("c", "C", 30)],
            ),
            Routine("pair", "Pair", poses=[Pose("d", "D", 10), Pose("e", "E", 10)]),
            Routine("solo", "Solo", poses=[Pose("f", "F", 15)]),
            Routine("empty", "Empty"),
        ]
    )


def _controller(transition_seconds: int = 10) -> RoutinePlayerController:
    model = RoutinePlayerModel(catalog=_catalog(), transition_seconds=transition_seconds)
    return RoutinePlayerController(model=model)


def _snapshot(controller: RoutinePlayerController):
    return copy.deepcopy(controller.state)


def _tick(controller: RoutinePlayerController, count: int) -> None:
    for _ in range(count):
        controller.on_tick()


class IdleStateTests(unittest.TestCase):
    def test_initial_state_mirrors_first_pose(self) -> None:
        controller = _controller()
        self.assertEqual(controller.selected_routine.id, "flow")
        self.assertFalse(controller.is_playing())
        self.assertEqual(controller.current_phase(), PosePhase(0))
        self.assertEqual(controller.remaining_seconds(), 30)

    def test_select_routine_while_idle_updates_remaining(self) -> None:
        controller = _controller()
        self.assertTrue(controller.select_routine("solo"))
        self.assertEqual(controller.selected_routine.id, "solo")
        self.assertEqual(controller.remaining_seconds(), 15)

    def test_select_empty_routine_shows_zero(self) -> None:
        controller = _controller()
        controller.select_routine("empty")
        self.assertEqual(controller.remaining_seconds(), 0)
        self.assertEqual(controller.total_routine_seconds(), 0)

    def test_select_unknown_routine_is_ignored(self) -> None:
        controller = _controller()
        self.assertFalse(controller.select_routine("missing"))
        self.assertEqual(controller.selected_routine.id, "flow")

    def test_select_while_playing_does_not_disturb_playback(self) -> None:
        controller = _controller()
        controller.start()
        _tick(controller, 3)
        before = _snapshot(controller)

        self.assertFalse(controller.select_routine("solo"))

        self.assertEqual(controller.selected_routine.id, "flow")
        self.assertEqual(controller.state, before)

    def test_adjusting_first_pose_while_idle_refreshes_remaining(self) -> None:
        controller = _controller()
        self.assertTrue(controller.adjust_pose_duration("a", 5))
        self.assertEqual(controller.remaining_seconds(), 35)

    def test_adjusting_other_routine_leaves_idle_remaining(self) -> None:
        controller = _controller()
        controller.adjust_pose_duration("f", 5)
        self.assertEqual(controller.remaining_seconds(), 30)


class StartCommandTests(unittest.TestCase):
    def test_start_enters_first_pose(self) -> None:
        controller = _controller()
        self.assertTrue(controller.start())
        self.assertTrue(controller.is_playing())
        self.assertFalse(controller.is_paused())
        self.assertEqual(controller.current_pose_index(), 0)
        self.assertEqual(controller.current_phase_kind(), PhaseKind.POSE)
        self.assertEqual(controller.remaining_seconds(), 30)

    def test_start_on_empty_routine_is_noop(self) -> None:
        controller = _controller()
        controller.select_routine("empty")
        self.assertFalse(controller.start())
        self.assertFalse(controller.is_playing())
        self.assertFalse(controller.on_tick())


class PlaybackTests(unittest.TestCase):
    def test_full_run_returns_to_idle_after_expected_ticks(self) -> None:
        controller = _controller()
        controller.start()
        ticks = 0
        while controller.is_playing():
            self.assertTrue(controller.on_tick())
            ticks += 1
        self.assertEqual(ticks, 120)
        self.assertEqual(ticks, controller.total_routine_seconds())
        # Finished playback shows the first pose again.
        self.assertEqual(controller.current_phase(), PosePhase(0))
        self.assertEqual(controller.remaining_seconds(), 30)

    def test_toggle_pause_twice_restores_state(self) -> None:
        controller = _controller()
        controller.start()
        _tick(controller, 33)
        before = _snapshot(controller)

        self.assertTrue(controller.toggle_pause())
        self.assertTrue(controller.toggle_pause())

        self.assertEqual(controller.state, before)

    def test_ticks_are_suppressed_while_paused(self) -> None:
        controller = _controller()
        controller.start()
        _tick(controller, 35)
        controller.toggle_pause()
        remaining = controller.remaining_seconds()
        phase = controller.current_phase()

        for _ in range(100):
            self.assertFalse(controller.on_tick())

        self.assertEqual(controller.remaining_seconds(), remaining)
        self.assertEqual(controller.current_phase(), phase)
        self.assertEqual(controller.current_pose_index(), 0)

    def test_toggle_pause_while_idle_is_ignored(self) -> None:
        controller = _controller()
        self.assertFalse(controller.toggle_pause())
        self.assertFalse(controller.is_paused())

    def test_reset_restarts_without_leaving_playback(self) -> None:
        controller = _controller()
        controller.start()
        _tick(controller, 75)
        controller.toggle_pause()

        self.assertTrue(controller.reset())

        self.assertTrue(controller.is_playing())
        self.assertFalse(controller.is_paused())
        self.assertEqual(controller.current_phase(), PosePhase(0))
        self.assertEqual(controller.remaining_seconds(), 30)

    def test_exit_returns_to_idle(self) -> None:
        controller = _controller()
        controller.start()
        _tick(controller, 45)
        controller.toggle_pause()

        self.assertTrue(controller.exit())

        self.assertFalse(controller.is_playing())
        self.assertFalse(controller.is_paused())
        self.assertEqual(controller.current_phase(), PosePhase(0))
        self.assertEqual(controller.remaining_seconds(), 30)
        self.assertFalse(controller.on_tick())


class DurationAdjustmentTests(unittest.TestCase):
    def test_pose_duration_is_clamped(self) -> None:
        controller = _controller()
        controller.adjust_pose_duration("b", -1000)
        pose = controller.selected_routine.find_pose("b")
        self.assertEqual(pose.duration, MIN_DURATION)
        self.assertFalse(controller.adjust_pose_duration("b", -5))

    def test_unknown_pose_is_ignored(self) -> None:
        controller = _controller()
        self.assertFalse(controller.adjust_pose_duration("nope", 5))

    def test_transition_is_clamped(self) -> None:
        controller = _controller()
        self.assertTrue(controller.adjust_transition(-1000))
        self.assertEqual(controller.transition_seconds, MIN_TRANSITION)
        self.assertFalse(controller.adjust_transition(-5))

    def test_total_tracks_adjustments(self) -> None:
        controller = _controller()
        controller.adjust_pose_duration("c", 10)
        controller.adjust_transition(5)
        self.assertEqual(controller.total_routine_seconds(), 30 + 40 + 40 + 2 * 15)

    def test_transition_adjustment_snaps_live_transition(self) -> None:
        controller = _controller()
        controller.select_routine("pair")
        controller.start()
        _tick(controller, 10)
        self.assertEqual(controller.current_phase(), TransitionPhase(0))
        self.assertEqual(controller.remaining_seconds(), 10)

        self.assertTrue(controller.adjust_transition(5))

        self.assertEqual(controller.remaining_seconds(), 15)
        _tick(controller, 15)
        self.assertEqual(controller.current_phase(), PosePhase(1))

    def test_transition_adjustment_mid_countdown_restarts_it(self) -> None:
        controller = _controller()
        controller.select_routine("pair")
        controller.start()
        _tick(controller, 14)
        self.assertEqual(controller.remaining_seconds(), 6)

        controller.adjust_transition(-5)

        self.assertEqual(controller.remaining_seconds(), 5)

    def test_transition_adjustment_during_pose_leaves_remaining(self) -> None:
        controller = _controller()
        controller.start()
        _tick(controller, 4)
        controller.adjust_transition(5)
        self.assertEqual(controller.remaining_seconds(), 26)

    def test_pose_adjustment_does_not_retarget_live_hold(self) -> None:
        controller = _controller()
        controller.start()
        _tick(controller, 5)

        controller.adjust_pose_duration("a", 20)

        self.assertEqual(controller.remaining_seconds(), 25)
        self.assertEqual(controller.selected_routine.find_pose("a").duration, 50)

    def test_adjusted_upcoming_pose_is_used_when_reached(self) -> None:
        controller = _controller()
        controller.start()
        controller.adjust_pose_duration("b", -20)
        _tick(controller, 40)
        self.assertEqual(controller.current_phase(), PosePhase(1))
        self.assertEqual(controller.remaining_seconds(), 20)


class ListenerTests(unittest.TestCase):
    def test_listeners_fire_on_changes_only(self) -> None:
        controller = _controller()
        calls = []
        controller.add_listener(lambda: calls.append(controller.remaining_seconds()))

        controller.on_tick()
        controller.start()
        controller.on_tick()
        controller.adjust_pose_duration("missing", 5)

        self.assertEqual(calls, [30, 29])

    def test_removed_listener_is_not_called(self) -> None:
        controller = _controller()
        calls = []

        def listener() -> None:
            calls.append(True)

        controller.add_listener(listener)
        controller.remove_listener(listener)
        controller.start()
        self.assertEqual(calls, [])


class CaptionQueryTests(unittest.TestCase):
    def test_caption_follows_phase(self) -> None:
        controller = _controller()
        controller.start()
        self.assertEqual(controller.caption().title, "A")
        _tick(controller, 30)
        caption = controller.caption()
        self.assertEqual(caption.title, "Transition")
        self.assertEqual(caption.info, "Up next: B — 40s")


if __name__ == "__main__":
    unittest.main()
