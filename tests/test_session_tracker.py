from ai_services.session_tracker import (
    CRISIS_QUESTION, QUESTION_TYPES, create_initial_session_state
)
from database.models import EmotionCategory, SessionPhase, TherapyApproach


def test_depth_grows_by_one_per_turn(tracker):
    state = create_initial_session_state()
    entries = ["", "hello", "I want to end my life", "Work was fine.", "?!"]

    for text in entries:
        state = tracker.advance(state, text)

    assert state.session_depth == len(entries)


def test_advance_returns_a_new_state(tracker):
    state = create_initial_session_state()
    new_state = tracker.advance(state, "I feel so anxious about work and can't sleep")

    assert state.session_depth == 0
    assert state.recent_topics == []
    assert new_state.session_depth == 1


def test_anxious_about_work_scenario(tracker):
    state = tracker.advance(create_initial_session_state(), "I feel so anxious about work and can't sleep")

    assert "work" in state.last_analysis.topics
    assert state.last_analysis.emotions["anxiety"] > 0
    assert EmotionCategory.ANXIETY in state.dominant_emotions
    assert state.approach_used == [TherapyApproach.CBT, TherapyApproach.MINDFULNESS]
    assert state.phase == SessionPhase.NORMAL


def test_crisis_indicator_switches_phase_and_back(tracker):
    state = tracker.advance(create_initial_session_state(), "I want to END MY LIFE.")
    assert state.crisis_detected

    state = tracker.advance(state, "Thanks, I talked to a friend and feel calmer.")
    assert not state.crisis_detected


def test_recent_topics_window_is_capped(tracker):
    state = create_initial_session_state()
    for _ in range(3):
        state = tracker.advance(state, "My boss at work again.")

    assert len(state.recent_topics) <= 3
    assert state.recent_topics[0] == "work"

    state = tracker.advance(state, "My sister and my boss argued about money at home.")
    assert state.recent_topics == ["work", "family", "finance"]


def test_emotion_classification_fallbacks(tracker):
    assert tracker.advance(create_initial_session_state(), "The weather is mild").dominant_emotions == [
        EmotionCategory.NEUTRAL
    ]

    grief = tracker.advance(create_initial_session_state(), "My dog died last week")
    assert grief.dominant_emotions == [EmotionCategory.GRIEF]
    assert grief.approach_used == [TherapyApproach.SUPPORTIVE, TherapyApproach.EXISTENTIAL]

    confused = tracker.advance(create_initial_session_state(), "I'm unsure what to do next")
    assert confused.approach_used == [TherapyApproach.SOLUTION_FOCUSED, TherapyApproach.EXISTENTIAL]


def test_approach_priority_order(tracker):
    approach = tracker.select_approach([EmotionCategory.GRIEF, EmotionCategory.DEPRESSION])
    assert approach == [TherapyApproach.CBT, TherapyApproach.SUPPORTIVE]

    assert tracker.select_approach([EmotionCategory.JOY]) == [
        TherapyApproach.SUPPORTIVE, TherapyApproach.SOLUTION_FOCUSED
    ]


def test_next_question_never_repeats_last_type(tracker):
    state = create_initial_session_state()

    for _ in range(20):
        previous = state.last_question_type
        question, state = tracker.next_question(state)
        assert question
        assert state.last_question_type in QUESTION_TYPES
        assert state.last_question_type != previous

    assert len(state.question_types) == 20
    assert state.session_depth == 0


def test_next_question_in_crisis(tracker):
    state = tracker.advance(create_initial_session_state(), "I want to die")
    question, new_state = tracker.next_question(state)

    assert question == CRISIS_QUESTION
    assert new_state == state
