"""Name vocabularies and the person-match stopword filter."""

from __future__ import annotations

# Frequent surnames (matched case-insensitively through the name dictionary)
DEFAULT_NAMES: tuple[str, ...] = (
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson",
    "Thomas", "Taylor", "Moore", "Jackson", "Martin", "Lee", "Perez", "Thompson",
    "White", "Harris", "Sanchez", "Clark", "Ramirez", "Lewis", "Robinson", "Walker",
    "Young", "Allen", "King", "Wright", "Scott", "Torres", "Nguyen", "Hill", "Flores",
    "Green", "Adams", "Nelson", "Baker", "Hall", "Rivera", "Campbell", "Mitchell",
    "Carter", "Roberts", "Gomez", "Phillips", "Turner", "Parker", "Evans", "Edwards",
    "Collins", "Stewart", "Morris", "Murphy", "Cook", "Rogers", "Morgan",
    "Patel", "Singh", "Khan", "Ali", "Mohammed", "Mohammad", "Abdullah", "Hussain",
    "Kim", "Park", "Chen", "Wang", "Zhang", "Lin", "Tran", "Ng", "Chaudhry", "Ahmad",
    "Iqbal", "Rahman",
)

COMMON_FIRST_NAMES: tuple[str, ...] = (
    "James", "Mary", "Robert", "Patricia", "John", "Jennifer", "Michael", "Linda",
    "William", "Elizabeth", "David", "Barbara", "Richard", "Susan", "Joseph", "Jessica",
    "Thomas", "Sarah", "Charles", "Karen", "Christopher", "Nancy", "Daniel", "Lisa",
    "Matthew", "Betty", "Anthony", "Margaret", "Mark", "Sandra", "Donald", "Ashley",
    "Steven", "Kimberly", "Paul", "Emily", "Andrew", "Donna", "Joshua", "Michelle",
    "Kenneth", "Dorothy", "Kevin", "Carol", "Brian", "Amanda", "George", "Melissa",
    "Timothy", "Deborah", "Ronald", "Stephanie", "Edward", "Rebecca", "Jason", "Sharon",
    "Jeffrey", "Laura", "Ryan", "Cynthia", "Jacob", "Kathleen", "Gary", "Amy",
    "Nicholas", "Shirley", "Eric", "Angela", "Jonathan", "Helen", "Stephen", "Anna",
    "Larry", "Brenda", "Justin", "Pamela", "Scott", "Nicole", "Brandon", "Samantha",
    "Frank", "Katherine", "Benjamin", "Emma", "Gregory", "Ruth", "Samuel", "Christine",
    "Patrick", "Catherine", "Alexander", "Debra", "Jack", "Rachel", "Dennis", "Carolyn",
    "Jerry", "Janet", "Tyler", "Maria",
    "Mohammed", "Muhammad", "Ahmed", "Ahmad", "Omar", "Hassan", "Hussein", "Abdullah",
    "Fatima", "Aisha", "Amelia", "Priya", "Anjali", "Sofia", "Noor", "Amina",
    "Li", "Wei", "Min", "Hao", "Jin", "Sang", "Hye", "Yuki", "Mei", "Ravi",
    "Imran", "Farah", "Leila", "Zara",
)

# Honorifics; a trailing "." is optional in the compiled pattern
TITLES: tuple[str, ...] = (
    "Drs", "Dr", "Prof", "Mrs", "Mr", "Ms", "Mx", "Capt", "Captain", "Lt", "Lieutenant",
    "Sgt", "Sergeant", "Officer", "Chief", "Judge", "Sir", "Dame", "Madam", "Rev",
    "Reverend", "Father", "Fr", "Sister", "Brother", "Pastor", "Chaplain", "Rabbi", "Imam",
)

# Clinical abbreviations and jargon that look like names to the capitalized
# word heuristics.  Compared after stripping punctuation and upper-casing.
NAME_STOPLIST: frozenset[str] = frozenset({
    "CKD", "ESBL", "ICU", "BKA", "IDDM", "MRSA", "ASTHMA", "DIALYSIS", "MEROPENEM",
    "SEPSIS", "HYPERTENSION", "DIABETES", "E COLI", "HGB", "HCT", "POC", "IV",
})


def is_name_stopword(candidate: str) -> bool:
    """True if a person-like match should be left alone.

    "St." / "St " prefixes are reserved for streets and facilities.
    """
    trimmed = candidate.strip()
    lower = trimmed.lower()
    if lower.startswith(("st. ", "st ")):
        return True
    key = "".join(c for c in trimmed if c.isalnum() or c == " ").upper().strip()
    return key in NAME_STOPLIST


def accept_name(candidate: str) -> bool:
    return not is_name_stopword(candidate)
