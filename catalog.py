# Built-in level data for both games.
# The chemistry catalog can be overridden by JSON shards (see bank.py);
# adventure levels only list tiers, their equations are generated per request.

CHEMICALS = [
    {
        "kind": "chemical",
        "id": "H2SO4",
        "name": "Sulfuric Acid",
        "formula": "H₂SO₄",
        "color": "#FFE135",  # pale yellow
        "concentration": 1.0,
        "volume": 100,
        "description": "A strong acid used in many industrial processes",
    },
    {
        "kind": "chemical",
        "id": "NaOH",
        "name": "Sodium Hydroxide",
        "formula": "NaOH",
        "color": "#E3F2FD",  # pale blue
        "concentration": 1.0,
        "volume": 100,
        "description": "A strong base, also known as caustic soda",
    },
    {
        "kind": "chemical",
        "id": "HCl",
        "name": "Hydrochloric Acid",
        "formula": "HCl",
        "color": "#FFCDD2",  # pale red
        "concentration": 1.0,
        "volume": 100,
        "description": "A strong acid found in stomach acid",
    },
    {
        "kind": "chemical",
        "id": "NH3",
        "name": "Ammonia",
        "formula": "NH₃",
        "color": "#E8F5E8",  # pale green
        "concentration": 1.0,
        "volume": 100,
        "description": "A weak base with a pungent smell",
    },
]

REACTIONS = [
    {
        "kind": "reaction",
        "id": "acidBase1",
        "name": "Acid-Base Neutralization",
        "description": "Sulfuric acid reacts with sodium hydroxide",
        "reactants": [{"formula": "H₂SO₄", "ratio": 1}, {"formula": "NaOH", "ratio": 2}],
        "products": [{"formula": "Na₂SO₄", "ratio": 1}, {"formula": "H₂O", "ratio": 2}],
        "correct_ratio": [1, 2],
        "result_color": "#C8E6C9",
    },
    {
        "kind": "reaction",
        "id": "acidBase2",
        "name": "Simple Neutralization",
        "description": "Hydrochloric acid reacts with sodium hydroxide",
        "reactants": [{"formula": "HCl", "ratio": 1}, {"formula": "NaOH", "ratio": 1}],
        "products": [{"formula": "NaCl", "ratio": 1}, {"formula": "H₂O", "ratio": 1}],
        "correct_ratio": [1, 1],
        "result_color": "#E1F5FE",
    },
]

# Chemistry levels reference catalog ids; a level whose ids are missing is skipped.
CHEMISTRY_LEVELS = [
    {
        "id": "level1",
        "title": "Basic Neutralization",
        "description": "Mix H₂SO₄ and NaOH in the correct 1:2 ratio to neutralize the solution",
        "reaction_id": "acidBase1",
        "chemical_ids": ["H2SO4", "NaOH"],
        "max_attempts": 3,
        "score_multiplier": 1,
    },
    {
        "id": "level2",
        "title": "Simple Salt Formation",
        "description": "Create salt water by mixing HCl and NaOH in equal proportions",
        "reaction_id": "acidBase2",
        "chemical_ids": ["HCl", "NaOH"],
        "max_attempts": 3,
        "score_multiplier": 1.5,
    },
]

ADVENTURE_LEVELS = [
    {
        "id": "dungeon-entrance",
        "name": "The Dungeon Entrance",
        "description": "A mysterious door blocks your path. Solve the magical equation to unlock it.",
        "difficulties": [1, 1],
        "reward": "Ancient Key",
        "story_text": (
            "You stand before an ancient stone door covered in glowing runes. "
            "The magic responds to mathematical truth..."
        ),
    },
    {
        "id": "treasure-chamber",
        "name": "The First Treasure Chamber",
        "description": "Golden chests await, but each requires solving an equation to open.",
        "difficulties": [2, 2, 1],
        "reward": "Magic Scroll",
        "story_text": (
            "The chamber gleams with golden light. Three treasure chests pulse with "
            "magical energy, each sealed with a mathematical lock."
        ),
    },
    {
        "id": "bridge-puzzle",
        "name": "The Bridge of Variables",
        "description": "A mystical bridge appears only when you solve the guardian's riddles.",
        "difficulties": [3, 3],
        "reward": "Crystal of Power",
        "story_text": (
            "Before you lies a chasm spanned by shimmering magical energy. "
            'The bridge guardian speaks: "Answer my riddles to cross."'
        ),
    },
    {
        "id": "dragons-lair",
        "name": "The Dragon's Mathematical Lair",
        "description": "Face the ancient dragon in a battle of wits and equations.",
        "difficulties": [4, 4, 3],
        "reward": "Dragon Scale Shield",
        "story_text": (
            "The dragon raises its mighty head, eyes glowing with ancient wisdom. "
            '"Prove your mathematical prowess, young adventurer!"'
        ),
    },
    {
        "id": "final-sanctuary",
        "name": "The Ultimate Sanctuary",
        "description": "The final challenge awaits. Master the most complex equations to claim victory.",
        "difficulties": [5, 5, 4, 4],
        "reward": "Crown of Mathematical Mastery",
        "story_text": (
            "At the heart of the dungeon lies the Ultimate Sanctuary, "
            "where only the most skilled mathematicians may enter..."
        ),
    },
]
