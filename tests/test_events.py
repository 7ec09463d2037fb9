import unittest

from mandelview.events import (
    Direction,
    Pan,
    Quit,
    Recenter,
    ScriptedEventSource,
    ZoomIn,
    ZoomOut,
    event_for_button,
    event_for_close,
    event_for_key,
    event_for_wheel,
    parse_script,
)


class TestBindings(unittest.TestCase):

    def test_arrow_and_vi_keys_are_equivalent(self):
        pairs = (("up", "k"), ("down", "j"), ("left", "h"), ("right", "l"))
        for arrow, vi in pairs:
            with self.subTest(arrow=arrow):
                self.assertEqual(event_for_key(arrow), event_for_key(vi))
                self.assertIsInstance(event_for_key(arrow), Pan)
        self.assertEqual(event_for_key("up"), Pan(Direction.UP))
        self.assertEqual(event_for_key("l"), Pan(Direction.RIGHT))

    def test_zoom_and_quit_keys(self):
        for key in ("plus", "+", "p"):
            self.assertEqual(event_for_key(key), ZoomIn())
        for key in ("minus", "-", "m"):
            self.assertEqual(event_for_key(key), ZoomOut())
        self.assertEqual(event_for_key("q"), Quit())

    def test_unknown_key(self):
        self.assertIsNone(event_for_key("x"))

    def test_wheel(self):
        self.assertEqual(event_for_wheel(-1), ZoomIn())
        self.assertEqual(event_for_wheel(1), ZoomOut())
        self.assertIsNone(event_for_wheel(0))

    def test_buttons(self):
        self.assertEqual(event_for_button("right", 12, 34), Recenter(12, 34))
        self.assertIsNone(event_for_button("left", 12, 34))

    def test_close(self):
        self.assertEqual(event_for_close(), Quit())


class TestParseScript(unittest.TestCase):

    def test_ticks_and_events(self):
        ticks = parse_script("k, k,plus;click:40x30;;wheel-up,wheel-down;quit")
        self.assertEqual(ticks, [
            [Pan(Direction.UP), Pan(Direction.UP), ZoomIn()],
            [Recenter(40, 30)],
            [],
            [ZoomOut(), ZoomIn()],
            [Quit()],
        ])

    def test_empty_script_is_one_silent_tick(self):
        self.assertEqual(parse_script(""), [[]])

    def test_malformed_tokens(self):
        for script in ("jump", "click:40", "click:axb", "click:1x2x3"):
            with self.subTest(script=script):
                with self.assertRaises(ValueError):
                    parse_script(script)


class TestScriptedEventSource(unittest.TestCase):

    def test_replays_ticks_in_order(self):
        source = ScriptedEventSource.from_script("h,j;q")
        self.assertFalse(source.exhausted)
        self.assertEqual(source.poll(), [Pan(Direction.LEFT), Pan(Direction.DOWN)])
        self.assertEqual(source.poll(), [Quit()])
        self.assertTrue(source.exhausted)
        self.assertEqual(source.poll(), [])

    def test_push(self):
        source = ScriptedEventSource()
        source.push(ZoomIn(), ZoomOut())
        self.assertEqual(source.poll(), [ZoomIn(), ZoomOut()])


if __name__ == '__main__':
    unittest.main()
