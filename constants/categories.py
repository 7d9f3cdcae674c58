"""
Grocery Category Constants

Keyword tables used to assign consolidated grocery items to store aisles.
"""

# Fallback for anything the tables below do not recognise
DEFAULT_CATEGORY = 'pantry'

GROCERY_CATEGORIES = {
    'produce', 'dairy', 'meat', 'seafood', 'spices', 'pantry', 'frozen',
    'beverages', 'household', 'bakery', 'condiments',
}

# Whole-name matches, checked before single keywords
CATEGORY_PHRASES = {
    'olive oil': 'pantry',
    'vegetable oil': 'pantry',
    'coconut milk': 'pantry',
    'peanut butter': 'pantry',
    'baking soda': 'pantry',
    'baking powder': 'pantry',
    'black pepper': 'spices',
    'bell pepper': 'produce',
    'green onion': 'produce',
    'sour cream': 'dairy',
    'cream cheese': 'dairy',
    'heavy cream': 'dairy',
    'ice cream': 'frozen',
    'soy sauce': 'condiments',
    'hot sauce': 'condiments',
    'fish sauce': 'condiments',
    'paper towels': 'household',
    'aluminum foil': 'household',
    'dish soap': 'household',
}

# Single-word keywords (singular and plural spelled out)
CATEGORY_KEYWORDS = {
    # Produce
    'tomato': 'produce', 'tomatoes': 'produce',
    'onion': 'produce', 'onions': 'produce',
    'garlic': 'produce', 'shallot': 'produce', 'shallots': 'produce',
    'potato': 'produce', 'potatoes': 'produce',
    'carrot': 'produce', 'carrots': 'produce',
    'celery': 'produce', 'lettuce': 'produce', 'spinach': 'produce',
    'kale': 'produce', 'cabbage': 'produce', 'broccoli': 'produce',
    'cauliflower': 'produce', 'zucchini': 'produce', 'cucumber': 'produce',
    'mushroom': 'produce', 'mushrooms': 'produce',
    'avocado': 'produce', 'avocados': 'produce',
    'lemon': 'produce', 'lemons': 'produce', 'lime': 'produce', 'limes': 'produce',
    'apple': 'produce', 'apples': 'produce', 'banana': 'produce', 'bananas': 'produce',
    'orange': 'produce', 'oranges': 'produce', 'berries': 'produce',
    'ginger': 'produce', 'cilantro': 'produce', 'parsley': 'produce',
    'scallion': 'produce', 'scallions': 'produce', 'jalapeno': 'produce',
    # Dairy
    'milk': 'dairy', 'butter': 'dairy', 'cheese': 'dairy', 'cream': 'dairy',
    'yogurt': 'dairy', 'parmesan': 'dairy', 'mozzarella': 'dairy',
    'cheddar': 'dairy', 'feta': 'dairy', 'egg': 'dairy', 'eggs': 'dairy',
    # Meat
    'chicken': 'meat', 'beef': 'meat', 'pork': 'meat', 'turkey': 'meat',
    'bacon': 'meat', 'sausage': 'meat', 'ham': 'meat', 'lamb': 'meat',
    'steak': 'meat',
    # Seafood
    'salmon': 'seafood', 'shrimp': 'seafood', 'tuna': 'seafood',
    'cod': 'seafood', 'fish': 'seafood', 'scallops': 'seafood',
    # Spices
    'salt': 'spices', 'pepper': 'spices', 'cumin': 'spices', 'paprika': 'spices',
    'oregano': 'spices', 'basil': 'spices', 'thyme': 'spices', 'rosemary': 'spices',
    'cinnamon': 'spices', 'nutmeg': 'spices', 'turmeric': 'spices',
    'cayenne': 'spices', 'powder': 'spices', 'seasoning': 'spices',
    'vanilla': 'spices',
    # Pantry
    'flour': 'pantry', 'sugar': 'pantry', 'rice': 'pantry', 'pasta': 'pantry',
    'spaghetti': 'pantry', 'noodles': 'pantry', 'oats': 'pantry',
    'oil': 'pantry', 'vinegar': 'pantry', 'broth': 'pantry', 'stock': 'pantry',
    'beans': 'pantry', 'lentils': 'pantry', 'honey': 'pantry', 'syrup': 'pantry',
    # Condiments
    'ketchup': 'condiments', 'mustard': 'condiments', 'mayonnaise': 'condiments',
    'salsa': 'condiments', 'sauce': 'condiments',
    # Bakery
    'bread': 'bakery', 'tortilla': 'bakery', 'tortillas': 'bakery',
    'bun': 'bakery', 'buns': 'bakery', 'bagel': 'bakery', 'bagels': 'bakery',
    'baguette': 'bakery',
    # Frozen
    'frozen': 'frozen',
    # Beverages
    'coffee': 'beverages', 'tea': 'beverages', 'juice': 'beverages',
    'soda': 'beverages', 'wine': 'beverages', 'beer': 'beverages',
    # Household
    'napkins': 'household', 'detergent': 'household', 'sponges': 'household',
}
