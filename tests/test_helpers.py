import unittest

from chatbot import get_bot_reply, get_health_advice
from directory import all_specialties, doctors_by_specialty
from ui import _format_date, _format_time


class DirectoryTests(unittest.TestCase):
    def test_known_specialty(self):
        self.assertEqual(doctors_by_specialty("Dermatology"), ["Dr. Emily Davis", "Dr. Andrew Brown"])

    def test_unknown_specialty_is_empty(self):
        self.assertEqual(doctors_by_specialty("Unknown"), [])

    def test_specialties_in_declared_order(self):
        self.assertEqual(all_specialties()[:2], ["General Medicine", "Cardiology"])
        self.assertEqual(len(all_specialties()), 6)

    def test_lookup_returns_a_copy(self):
        doctors_by_specialty("Cardiology").append("Dr. Nobody")
        self.assertNotIn("Dr. Nobody", doctors_by_specialty("Cardiology"))


class FormattingTests(unittest.TestCase):
    def test_format_date(self):
        self.assertEqual(_format_date("2024-06-20"), "June 20, 2024")

    def test_format_date_passes_through_garbage(self):
        self.assertEqual(_format_date("someday"), "someday")

    def test_format_time(self):
        self.assertEqual(_format_time("14:30"), "2:30 PM")
        self.assertEqual(_format_time("09:05"), "9:05 AM")
        self.assertEqual(_format_time("12:00"), "12:00 PM")
        self.assertEqual(_format_time("00:15"), "12:15 AM")


class ChatbotTests(unittest.TestCase):
    def test_keyword_replies(self):
        self.assertIn("Fever", get_bot_reply("I have a FEVER"))
        self.assertIn("Headaches", get_bot_reply("bad headache today"))
        self.assertIn("book an appointment", get_bot_reply("how do I get an appointment?"))

    def test_keyword_order(self):
        self.assertIn("Fever", get_bot_reply("fever and headache"))

    def test_greeting_needs_whole_word(self):
        self.assertIn("Hello!", get_bot_reply("hi there"))
        self.assertNotIn("Hello!", get_bot_reply("this is odd"))

    def test_default_reply(self):
        self.assertIn("general health questions", get_bot_reply("what is the weather"))

    def test_health_advice(self):
        self.assertIn("seeking medical attention", get_health_advice({"symptom": "Back pain", "severity": 9}))
        self.assertIn("Monitor your pain", get_health_advice({"symptom": "Back pain", "severity": 4}))
        self.assertIn("hydrated", get_health_advice({"symptom": "Fever", "severity": 5}))
        self.assertIn("Symptom logged", get_health_advice({"symptom": "Cough", "severity": 2}))


if __name__ == "__main__":
    unittest.main()
