CASE_CATEGORIES = [
    "Criminal",
    "Civil",
    "Constitutional",
    "Family",
    "Cyber Crime",
    "Property",
    "Labour",
    "Consumer",
    "Environmental",
    "Corporate",
]

OFFENCE_TYPES = [
    "Murder / Homicide",
    "Theft / Robbery",
    "Fraud / Cheating",
    "Assault / Battery",
    "Kidnapping / Abduction",
    "Sexual Offence",
    "Drug Offence",
    "Corruption",
    "Defamation",
    "Breach of Trust",
    "Domestic Violence",
    "Dowry Related",
]

# Statutes the assistant is expected to cite from.
STATUTES = [
    "Indian Penal Code (IPC)",
    "Bharatiya Nyaya Sanhita (BNS)",
    "Code of Criminal Procedure (CrPC)",
    "Bharatiya Nagarik Suraksha Sanhita (BNSS)",
    "Indian Evidence Act",
    "Bharatiya Sakshya Adhiniyam",
]

ANALYSIS_CARDS = [
    (1, "Applicable Legal Sections"),
    (2, "Punishment / Sentence Range"),
    (3, "Court Presentation Strategy"),
    (4, "Relevant Case Precedents"),
    (5, "Court-Ready Documentation"),
]
