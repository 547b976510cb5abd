import math

import pytest

from minex3.animation import (
    AnimationIndices,
    PlayerAnimation,
    PlayerAnimationState,
    SpriteAnimation,
    flip_for_intent,
)


def test_new_animation_is_idle_at_first_frame():
    anim = PlayerAnimation()
    assert anim.state is PlayerAnimationState.IDLING
    assert anim.frame == 0
    assert anim.atlas_index() == 0
    assert not anim.changed()


def test_idle_frames_wrap_around():
    anim = PlayerAnimation()
    seen = []
    for _ in range(PlayerAnimation.IDLE_FRAMES):
        anim.update_timer(PlayerAnimation.IDLE_INTERVAL)
        assert anim.changed()
        seen.append(anim.frame)
    assert anim.frame == 0
    assert sorted(seen) == list(range(PlayerAnimation.IDLE_FRAMES))


def test_partial_tick_does_not_change_frame():
    anim = PlayerAnimation()
    anim.update_timer(PlayerAnimation.IDLE_INTERVAL / 2)
    assert anim.frame == 0
    assert not anim.changed()


def test_walking_atlas_indices_follow_idle_ones():
    anim = PlayerAnimation()
    anim.update_state(PlayerAnimationState.WALKING)
    assert anim.atlas_index() == 6
    indices = set()
    for _ in range(PlayerAnimation.WALKING_FRAMES):
        anim.update_timer(PlayerAnimation.WALKING_INTERVAL)
        indices.add(anim.atlas_index())
    assert indices == {6 + i for i in range(PlayerAnimation.WALKING_FRAMES)}


def test_update_state_to_same_state_keeps_progress():
    anim = PlayerAnimation()
    anim.update_timer(PlayerAnimation.IDLE_INTERVAL)
    frame = anim.frame
    anim.update_state(PlayerAnimationState.IDLING)
    assert anim.frame == frame
    assert anim.changed()


def test_update_state_change_restarts():
    anim = PlayerAnimation()
    anim.update_timer(PlayerAnimation.IDLE_INTERVAL)
    anim.update_state(PlayerAnimationState.WALKING)
    assert anim.frame == 0
    assert anim.state is PlayerAnimationState.WALKING
    assert anim.timer.duration == PlayerAnimation.WALKING_INTERVAL
    assert not anim.changed()


def test_step_sound_on_frames_two_and_five():
    anim = PlayerAnimation()
    anim.update_state(PlayerAnimationState.WALKING)
    due = []
    for _ in range(PlayerAnimation.WALKING_FRAMES):
        anim.update_timer(PlayerAnimation.WALKING_INTERVAL)
        if anim.step_sound_due():
            due.append(anim.frame)
    assert due == [2, 5]


def test_idle_never_plays_steps():
    anim = PlayerAnimation()
    frames = []
    due = []
    for _ in range(6):
        anim.update_timer(PlayerAnimation.IDLE_INTERVAL)
        frames.append(anim.frame)
        due.append(bool(anim.step_sound_due()))
    assert frames == [1, 0, 1, 0, 1, 0]
    assert due == [False] * 6


@pytest.mark.parametrize(
    "dx, current, expected",
    [(-1.0, False, True), (1.0, True, False), (0.0, True, True), (0.0, False, False)],
)
def test_flip_for_intent(dx, current, expected):
    assert flip_for_intent(dx, current) is expected


def test_with_fps_sets_frame_duration():
    anim = SpriteAnimation.with_fps(AnimationIndices(0, 7), 12.0)
    assert anim.timer.duration == pytest.approx(1.0 / 12.0)
    assert anim.index == 0
    assert not anim.playing
    assert not anim.visible


def test_with_fps_rejects_non_positive():
    with pytest.raises(ValueError):
        SpriteAnimation.with_fps(AnimationIndices(0, 7), 0.0)


def test_playing_animation_loops_through_indices():
    indices = AnimationIndices(0, 7)
    anim = SpriteAnimation.with_fps(indices, 4.0)
    anim.start()
    assert anim.playing and anim.visible
    frames = [anim.tick(0.25) for _ in range(8)]
    assert frames[-1] == indices.first
    assert frames[:-1] == list(range(indices.first + 1, indices.last + 1))


def test_stopped_animation_does_not_advance():
    anim = SpriteAnimation.with_fps(AnimationIndices(0, 7), 4.0)
    anim.start()
    anim.tick(0.25)
    anim.stop()
    index = anim.index
    anim.tick(0.25)
    assert anim.index == index
    assert not anim.visible
    assert not anim.playing


def test_start_while_playing_keeps_index():
    anim = SpriteAnimation.with_fps(AnimationIndices(0, 7), 4.0)
    anim.start()
    anim.tick(0.25)
    index = anim.index
    anim.start()
    assert anim.index == index


def test_restart_resets_to_first_frame():
    anim = SpriteAnimation.with_fps(AnimationIndices(0, 7), 4.0)
    anim.start()
    anim.tick(0.25)
    anim.tick(0.25)
    anim.stop()
    anim.start()
    assert anim.index == 0
    assert math.isclose(anim.timer.elapsed, 0.0)