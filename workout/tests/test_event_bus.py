import unittest

from workout.events.Event_Bus import EventBus, WORKOUT_SET_COMPLETED


class TestEventBus(unittest.TestCase):

    def test_publish_reaches_subscribers_once(self):
        bus = EventBus()
        received = []
        handler = lambda name, payload: received.append((name, payload))
        bus.subscribe(WORKOUT_SET_COMPLETED, handler)
        bus.subscribe(WORKOUT_SET_COMPLETED, handler)
        bus.publish(WORKOUT_SET_COMPLETED, {"setNumber": 1})
        self.assertEqual(received, [(WORKOUT_SET_COMPLETED, {"setNumber": 1})])

        bus.unsubscribe(WORKOUT_SET_COMPLETED, handler)
        bus.unsubscribe(WORKOUT_SET_COMPLETED, handler)
        bus.publish(WORKOUT_SET_COMPLETED, {"setNumber": 2})
        self.assertEqual(len(received), 1)

    def test_failing_subscriber_does_not_stop_delivery(self):
        bus = EventBus()
        received = []

        def broken(name, payload):
            raise RuntimeError("boom")

        bus.subscribe(WORKOUT_SET_COMPLETED, broken)
        bus.subscribe(WORKOUT_SET_COMPLETED, lambda name, payload: received.append(payload))
        with self.assertLogs("workout.events.Event_Bus", level="ERROR"):
            bus.publish(WORKOUT_SET_COMPLETED, "payload")
        self.assertEqual(received, ["payload"])


if __name__ == '__main__':
    unittest.main()
