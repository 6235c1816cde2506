DOCTORS = {
    "General Medicine": ["Dr. Michael Chen", "Dr. Lisa Rodriguez", "Dr. James Wilson"],
    "Cardiology":       ["Dr. Sarah Johnson", "Dr. Robert Kim", "Dr. Maria Santos"],
    "Dermatology":      ["Dr. Emily Davis", "Dr. Andrew Brown"],
    "Neurology":        ["Dr. David Martinez", "Dr. Jennifer Lee"],
    "Orthopedics":      ["Dr. Thomas Anderson", "Dr. Rachel Green"],
    "Pediatrics":       ["Dr. Nancy White", "Dr. Kevin Park"],
}


def doctors_by_specialty(specialty: str) -> list[str]:
    return list(DOCTORS.get(specialty, []))


def all_specialties() -> list[str]:
    return list(DOCTORS)
