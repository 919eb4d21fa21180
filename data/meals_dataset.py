"""Built-in restaurant catalog used when no menu provider is available."""

from typing import List

from schemas.meal_schema import Meal

MEALS_DATA = [
    # High protein / bulk
    {"id": "bulk-1", "name": "Chicken Burrito Bowl", "restaurant": "Chipotle", "brand_id": "chipotle", "calories": 1050, "protein": 62, "carbs": 95, "fat": 42, "description": "Double chicken, white rice, black beans, fajita veggies, mild salsa, cheese, sour cream", "allergens": "dairy, gluten", "tags": ["chicken", "mexican", "bowl", "rice", "beans"]},
    {"id": "bulk-2", "name": "Double ShackBurger", "restaurant": "Shake Shack", "brand_id": "shakeshack", "calories": 930, "protein": 52, "carbs": 56, "fat": 58, "description": "Two beef patties, cheese, lettuce, tomato, ShackSauce", "allergens": "dairy, gluten, egg", "tags": ["beef", "burger", "cheese"]},
    {"id": "bulk-3", "name": "Big Kahuna Sub", "restaurant": "Jersey Mike's", "brand_id": "jerseymikes", "calories": 870, "protein": 48, "carbs": 68, "fat": 45, "description": "Ham, salami, pepperoni, provolone, lettuce, tomato, onions", "allergens": "dairy, gluten, pork", "tags": ["pork", "sub", "sandwich", "cheese"]},
    {"id": "bulk-4", "name": "Spicy Deluxe Sandwich", "restaurant": "Chick-fil-A", "brand_id": "chickfila", "calories": 550, "protein": 36, "carbs": 48, "fat": 24, "description": "Spicy chicken breast, lettuce, tomato, pepper jack cheese", "allergens": "dairy, gluten, egg", "tags": ["chicken", "spicy", "sandwich"]},
    {"id": "bulk-5", "name": "Honey BBQ Wings (15pc)", "restaurant": "Buffalo Wild Wings", "brand_id": "buffalowildwings", "calories": 1140, "protein": 78, "carbs": 60, "fat": 66, "description": "15 traditional wings with Honey BBQ sauce", "allergens": "gluten", "tags": ["chicken", "wings", "bbq"]},
    {"id": "bulk-6", "name": "Steak Burrito", "restaurant": "Chipotle", "brand_id": "chipotle", "calories": 1150, "protein": 58, "carbs": 100, "fat": 48, "description": "Steak, white rice, pinto beans, cheese, sour cream, guacamole", "allergens": "dairy, gluten", "tags": ["steak", "beef", "mexican", "burrito"]},
    {"id": "bulk-7", "name": "Double Meat Bowl", "restaurant": "Qdoba", "brand_id": "qdoba", "calories": 980, "protein": 65, "carbs": 75, "fat": 45, "description": "Double chicken, cilantro lime rice, black beans, corn salsa, cheese", "allergens": "dairy", "tags": ["chicken", "mexican", "bowl"]},
    # Cut / low calorie
    {"id": "cut-1", "name": "Chicken Salad Bowl", "restaurant": "Chipotle", "brand_id": "chipotle", "calories": 480, "protein": 52, "carbs": 18, "fat": 22, "description": "Double chicken, fajita veggies, fresh tomato salsa, lettuce", "allergens": "", "tags": ["chicken", "salad", "low-carb"]},
    {"id": "cut-2", "name": "Grilled Chicken Sandwich", "restaurant": "Chick-fil-A", "brand_id": "chickfila", "calories": 320, "protein": 30, "carbs": 36, "fat": 6, "description": "Grilled chicken breast, lettuce, tomato, multigrain bun", "allergens": "gluten", "tags": ["chicken", "grilled", "sandwich"]},
    {"id": "cut-3", "name": "Greens + Grains Bowl", "restaurant": "CAVA", "brand_id": "cava", "calories": 520, "protein": 38, "carbs": 45, "fat": 20, "description": "Grilled chicken, supergreens, brown rice, cucumber, tomato, lemon herb tahini", "allergens": "sesame", "tags": ["chicken", "salad", "bowl", "mediterranean"]},
    {"id": "cut-4", "name": "Turkey Sub (No Cheese)", "restaurant": "Jersey Mike's", "brand_id": "jerseymikes", "calories": 380, "protein": 32, "carbs": 44, "fat": 10, "description": "Turkey breast, lettuce, tomato, onions, oil & vinegar", "allergens": "gluten", "tags": ["turkey", "sub", "lean"]},
    {"id": "cut-5", "name": "Grilled Nuggets (12pc)", "restaurant": "Chick-fil-A", "brand_id": "chickfila", "calories": 200, "protein": 38, "carbs": 2, "fat": 4, "description": "12 grilled chicken nuggets", "allergens": "", "tags": ["chicken", "grilled", "low-carb"]},
    {"id": "cut-6", "name": "Protein Bowl", "restaurant": "Sweetgreen", "brand_id": "sweetgreen", "calories": 420, "protein": 42, "carbs": 28, "fat": 18, "description": "Grilled chicken, warm quinoa, kale, roasted chickpeas, tahini", "allergens": "sesame", "tags": ["chicken", "salad", "healthy"]},
    {"id": "cut-7", "name": "Naked Chicken Wings", "restaurant": "Buffalo Wild Wings", "brand_id": "buffalowildwings", "calories": 360, "protein": 48, "carbs": 0, "fat": 18, "description": "10 traditional wings, no sauce, no breading", "allergens": "", "tags": ["chicken", "wings", "keto", "low-carb"]},
    # Maintain / balanced
    {"id": "main-1", "name": "Chicken Bowl", "restaurant": "Chipotle", "brand_id": "chipotle", "calories": 680, "protein": 48, "carbs": 58, "fat": 26, "description": "Chicken, brown rice, black beans, fajita veggies, pico de gallo", "allergens": "", "tags": ["chicken", "mexican", "bowl", "balanced"]},
    {"id": "main-2", "name": "Original Chicken Sandwich", "restaurant": "Chick-fil-A", "brand_id": "chickfila", "calories": 440, "protein": 28, "carbs": 40, "fat": 18, "description": "Breaded chicken breast, pickles, butter bun", "allergens": "gluten, dairy, egg", "tags": ["chicken", "sandwich"]},
    {"id": "main-3", "name": "Classic Pita", "restaurant": "CAVA", "brand_id": "cava", "calories": 620, "protein": 36, "carbs": 55, "fat": 28, "description": "Grilled chicken, hummus, tomato cucumber salad, pickled onions, pita", "allergens": "gluten, sesame", "tags": ["chicken", "mediterranean", "pita"]},
    {"id": "main-4", "name": "ShackBurger", "restaurant": "Shake Shack", "brand_id": "shakeshack", "calories": 540, "protein": 28, "carbs": 40, "fat": 32, "description": "Single beef patty, cheese, lettuce, tomato, ShackSauce", "allergens": "dairy, gluten, egg", "tags": ["beef", "burger"]},
    {"id": "main-5", "name": "Club Sub", "restaurant": "Jersey Mike's", "brand_id": "jerseymikes", "calories": 590, "protein": 34, "carbs": 52, "fat": 28, "description": "Turkey, ham, bacon, provolone, lettuce, tomato, mayo", "allergens": "dairy, gluten, pork, egg", "tags": ["turkey", "pork", "sub"]},
    {"id": "main-6", "name": "Harvest Bowl", "restaurant": "Sweetgreen", "brand_id": "sweetgreen", "calories": 580, "protein": 32, "carbs": 52, "fat": 28, "description": "Grilled chicken, wild rice, roasted sweet potato, kale, balsamic", "allergens": "", "tags": ["chicken", "salad", "healthy"]},
    # Vegetarian
    {"id": "veg-1", "name": "Veggie Bowl", "restaurant": "Chipotle", "brand_id": "chipotle", "calories": 580, "protein": 18, "carbs": 72, "fat": 24, "description": "Sofritas, brown rice, black beans, fajita veggies, guacamole", "allergens": "soy", "tags": ["vegetarian", "vegan", "mexican", "bowl"]},
    {"id": "veg-2", "name": "Falafel Pita", "restaurant": "CAVA", "brand_id": "cava", "calories": 650, "protein": 22, "carbs": 68, "fat": 32, "description": "Falafel, hummus, tahini, pickled onions, tomato, pita", "allergens": "gluten, sesame", "tags": ["vegetarian", "mediterranean", "falafel"]},
    # Seafood
    {"id": "sea-1", "name": "Fish Taco Bowl", "restaurant": "Chipotle", "brand_id": "chipotle", "calories": 620, "protein": 35, "carbs": 52, "fat": 28, "description": "Grilled fish, cilantro lime rice, black beans, corn salsa", "allergens": "fish", "tags": ["fish", "seafood", "mexican"]},
    # Keto friendly
    {"id": "keto-1", "name": "Lettuce Wrap Burger", "restaurant": "Shake Shack", "brand_id": "shakeshack", "calories": 420, "protein": 26, "carbs": 8, "fat": 32, "description": "ShackBurger in a lettuce wrap, no bun", "allergens": "dairy, egg", "tags": ["beef", "burger", "keto", "low-carb"]},
    {"id": "keto-2", "name": "Carnitas Bowl (No Rice)", "restaurant": "Chipotle", "brand_id": "chipotle", "calories": 520, "protein": 42, "carbs": 12, "fat": 36, "description": "Double carnitas, fajita veggies, guacamole, cheese, lettuce", "allergens": "dairy, pork", "tags": ["pork", "keto", "low-carb", "mexican"]},
]


def load_default_catalog() -> List[Meal]:
    """Return the built-in catalog as Meal objects."""
    return [Meal(**item) for item in MEALS_DATA]
