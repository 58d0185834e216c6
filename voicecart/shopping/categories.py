"""Item categories for display grouping.

categorize(name) checks the item name against each category's keywords in
order (case-insensitive substring match); the first hit wins.
"""

OTHER = "Other"

# (category, keywords) in precedence order
CATEGORIES = [
    ("Dairy", ("milk", "cheese", "yogurt", "butter", "paneer", "curd")),
    ("Produce", ("apple", "banana", "orange", "tomato", "onion", "potato", "mango", "spinach")),
    ("Bakery", ("bread", "bun", "bagel")),
    ("Snacks", ("chips", "biscuits", "cookie", "namkeen")),
    ("Beverages", ("juice", "soda", "tea", "coffee", "water")),
    ("Household", ("soap", "detergent", "toothpaste", "shampoo")),
]


def categorize(name):
    t = name.lower()
    for category, keywords in CATEGORIES:
        if any(kw in t for kw in keywords):
            return category
    return OTHER


if __name__ == "__main__":
    for name in ["Whole Milk", "apples", "Brown Bread", "orange juice",
                 "Colgate Toothpaste", "Rubber Duck"]:
        print(f"  {name!r:24s} => {categorize(name)}")
