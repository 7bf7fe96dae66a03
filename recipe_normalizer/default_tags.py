"""Built-in tag taxonomy used when no catalog is configured."""

DEFAULT_TAG_DEFINITIONS = {
    "Dietary": {
        "tagId": "038e3305-b679-4822-bc57-6e6fda8eb766",
        "name": "Dietary",
        "children": {
            "vegetarian": {"tagId": "d58e5bf0-2fe7-4356-a9fa-17a6feec5764", "name": "Vegetarian"},
            "vegan": {"tagId": "570ac8b5-82f0-4fab-8b29-2c8b48c9e78b", "name": "Vegan"},
            "gluten-free": {"tagId": "d8f703fe-b0b5-43f4-ae15-7ecce6bf03c5", "name": "Gluten-free"},
            "dairy-free": {"tagId": "0656cd4b-ebdf-4217-b113-3590b3df1077", "name": "Dairy-free"},
            "egg-free": {"tagId": "d8661f0c-4a44-4ac3-a70b-fd8697e18478", "name": "Egg-free"},
            "nut-free": {"tagId": "a5c24644-1a0f-4af2-977f-c006aadb8b90", "name": "Nut-free"},
            "healthy": {"tagId": "88602d73-d03d-44bb-8a69-fbfcc7963d17", "name": "Healthy"},
            "low-calorie": {"tagId": "d19e9d74-f6f5-44e9-9cb2-9d14223b9531", "name": "Low-calorie"},
            "low-fat": {"tagId": "d2697ffb-2f44-4b74-930b-6f09184ea3a5", "name": "Low-fat"},
            "low-sugar": {"tagId": "9a783ff7-2286-4655-aa70-8e1dac5e88ec", "name": "Low-sugar"},
        },
    },
    "Difficulty": {
        "tagId": "5508c6d9-49c7-462e-9e45-f6e6c78abe6c",
        "name": "Difficulty",
        "children": {
            "hard": {"tagId": "28b6995b-811f-44bb-af9f-768d078e010e", "name": "Hard"},
            "easy": {"tagId": "95a5cc8c-3f69-4652-9810-6597002899bd", "name": "Easy"},
            "medium": {"tagId": "ff629e93-cc6a-4dbf-bc5e-6969f89eed47", "name": "Medium"},
        },
    },
    "Meal": {
        "tagId": "7a2dc44b-1eac-4810-8a1c-322cb14ce5c8",
        "name": "Meal",
        "children": {
            "dinner": {"tagId": "61ee0516-1987-4b6b-a59a-251cc07b2995", "name": "Dinner"},
            "lunch": {"tagId": "13aaec7b-70bd-4f9b-ac77-ffcea1e081cb", "name": "Lunch"},
            "snack": {"tagId": "229e59f5-fb5d-462b-84b5-3c8184cb603b", "name": "Snack"},
            "breakfast": {"tagId": "24a49560-c7be-42b2-a3c3-a7d4b7ef9b24", "name": "Breakfast"},
            "dessert": {"tagId": "4a021129-6fe1-48a9-ae53-014a16a8fe74", "name": "Dessert"},
            "entrée": {"tagId": "e4bf71d6-826f-4799-aad7-38de2b5750af", "name": "Entrée"},
            "preparation": {"tagId": "2f6fb407-9914-4636-9ed4-2fe7259130f6", "name": "Preparation"},
        },
    },
    "Cuisine": {
        "tagId": "bb5f54d1-47a6-4a6a-a6e8-6b2d8b37e7d5",
        "name": "Cuisine",
        "children": {
            "mexican": {"tagId": "c5db7042-4aae-49fd-ae09-0e7514a2a369", "name": "Mexican"},
            "indian": {"tagId": "3013ae97-596b-463b-ad68-99e4ea7d9617", "name": "Indian"},
            "italian": {"tagId": "20b77d21-acba-48af-8876-0a590e940e41", "name": "Italian"},
            "african": {"tagId": "afe6a080-2125-41d9-9ef9-aa8c0f785806", "name": "African"},
            "american": {"tagId": "aa2a2065-a641-4972-8c2a-6e4ba9f0edf2", "name": "American"},
            "british": {"tagId": "55e9e73c-41ed-4746-8230-29779dd28de7", "name": "British"},
            "caribbean": {"tagId": "05833a31-c630-4842-b1c4-7ae962982ec3", "name": "Caribbean"},
            "chinese": {"tagId": "d0f94199-dfbc-4177-bc1e-ca8ac1bf6b78", "name": "Chinese"},
            "european": {"tagId": "350d707d-f4d0-47e0-b416-b7f75ba55b0c", "name": "European"},
            "french": {"tagId": "5b3234b8-b058-4734-a721-471b6d46d64f", "name": "French"},
            "german": {"tagId": "823fdf20-a8c2-4703-acf1-d68a75690d1b", "name": "German"},
            "greek": {"tagId": "720d6df5-9297-4f13-8c99-7feb3578d80f", "name": "Greek"},
            "japanese": {"tagId": "98b0ac14-5b12-43c4-995d-7919c9eb03e6", "name": "Japanese"},
            "korean": {"tagId": "b785e047-2b2e-42ca-9d5f-255824f1e80f", "name": "Korean"},
            "latin american": {"tagId": "27be6390-9910-4855-9559-815292792347", "name": "Latin American"},
            "mediterranean": {"tagId": "f40bd993-016d-4784-9907-4bc130a7eeda", "name": "Mediterranean"},
            "middle eastern": {"tagId": "a3183122-1650-4680-8a3c-006bade549a7", "name": "Middle Eastern"},
            "spanish": {"tagId": "62c58f6b-c6e9-4d42-96de-1e494cfeea73", "name": "Spanish"},
            "thai": {"tagId": "3ec400ce-3c43-4e1b-93f9-f3b21c4c437e", "name": "Thai"},
            "vietnamese": {"tagId": "31945b3b-0f35-45b4-889a-a3a98f3a3ed5", "name": "Vietnamese"},
        },
    },
    "Cost": {
        "tagId": "e6167e53-7115-475d-ade0-6261e486f4ce",
        "name": "Cost",
        "children": {
            "$": {"tagId": "06158727-fc25-4d99-b356-7a36a07a8993", "name": "$"},
            "$$": {"tagId": "46839022-4057-4722-b2c0-0f376b5ad2f9", "name": "$$"},
            "$$$": {"tagId": "c403667a-343f-4af0-9bbe-d8350afdb474", "name": "$$$"},
        },
    },
    "Season": {
        "tagId": "4dbe2cc2-f67b-4108-8512-6dc2d63e7d74",
        "name": "Season",
        "children": {
            "summer": {"tagId": "df4c350e-5464-4906-b888-9360290e1aec", "name": "Summer"},
            "winter": {"tagId": "bcda96cd-3574-4438-8010-d2307e33ff43", "name": "Winter"},
            "spring": {"tagId": "7d65d713-dc1e-4ed2-b78b-8e9548fc838d", "name": "Spring"},
            "autumn": {"tagId": "ef75b2ef-abf7-46e7-b170-7dd432d67566", "name": "Autumn"},
        },
    },
    "Ingredient Category": {
        "tagId": "fda85407-3dd8-453f-9f67-8208f8f5c0be",
        "name": "Ingredient Category",
        "children": {
            "vegetables": {"tagId": "9df831cd-2bb2-4055-ab1a-2ca1a7ef3f0b", "name": "Vegetables"},
            "spices and herbs": {"tagId": "56aed225-b2fd-4597-b6ce-7f1611a6a805", "name": "Spices and herbs"},
            "cereals and legumes": {"tagId": "4b53d85b-d697-4934-b7cf-4d73d48f9ddb", "name": "Cereals and legumes"},
            "meats and poultry": {"tagId": "ce86bc64-f7bc-4784-85a5-1023bac4f848", "name": "Meats and poultry"},
            "seafood": {"tagId": "3743d884-982b-476d-84a3-8917c3ffe12a", "name": "Seafood"},
            "dairy": {"tagId": "c2c8da48-c8ab-4b77-bc27-b34384bc5ae8", "name": "Dairy"},
            "fruit": {"tagId": "d049b20c-1221-4e9c-b773-3f3d41f20ff7", "name": "Fruit"},
            "fats and oils": {"tagId": "b9bf4104-69bd-434c-af5f-f8041dd25315", "name": "Fats and oils"},
            "nuts and grains": {"tagId": "c7930747-3bb4-4fe1-ae22-24168676bc37", "name": "Nuts and grains"},
            "pasta and rice": {"tagId": "a631a4d8-2bc0-4560-89f2-4454d03181fe", "name": "Pasta and rice"},
        },
    },
}
