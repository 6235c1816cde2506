import re

BOT_NAME = "MediBot"

_GREETING_RE = re.compile(r"\b(hello|hi)\b")

# Checked in order; first keyword found in the message wins.
_KEYWORD_REPLIES = [
    ("fever", "Fever can be caused by many things. Stay hydrated and rest. "
              "If it persists, consult a doctor."),
    ("headache", "Headaches are common. Try to rest and drink water. "
                 "If severe, seek medical advice."),
    ("appointment", "You can book an appointment in the Book Appointment section."),
    ("symptom", "You can log your symptoms in the Log Symptom section."),
]
_GREETING_REPLY = "Hello! How can I assist you with your health today?"
_DEFAULT_REPLY = ("I am here to help with general health questions. "
                  "For emergencies, contact a healthcare professional.")


def get_bot_reply(message: str) -> str:
    msg = (message or "").lower()
    for keyword, reply in _KEYWORD_REPLIES:
        if keyword in msg:
            return reply
    if _GREETING_RE.search(msg):
        return _GREETING_REPLY
    return _DEFAULT_REPLY


def get_health_advice(symptom: dict) -> str:
    """Short advice shown after a symptom is logged."""
    label = str(symptom.get("symptom", "")).lower()
    if int(symptom.get("severity", 0)) >= 8:
        return "High severity. Please consider seeking medical attention."
    if "pain" in label:
        return "Monitor your pain and rest. If it worsens, consult a doctor."
    if "fever" in label:
        return "Stay hydrated and rest. If fever persists, see a doctor."
    return "Symptom logged. Take care and monitor your health."
