"""
Seed data — Sample records created by the Create Activities and Create Users steps.

Edit these lists to change what gets seeded. Titles must be unique: the
Create Activities step stores each created ID under a key derived from the title.
"""

# Fixed fields sent with every activity; the backend rejects activities
# without a language and system.
ACTIVITY_DEFAULTS = {
    "status": 1,
    "baseLanguage": "DUTCH",
    "enabledLanguages": ["DUTCH"],
    "durationLimited": False,
    "system": "NONE",
    "type": "MICRO_LEARNING",
}

SAMPLE_ACTIVITIES = [
    {"title": "Introduction to TypeScript", "description": "Learn the basics of TypeScript programming", "supplier": "Rakoo Learning"},
    {"title": "Advanced React Patterns", "description": "Master advanced React development patterns", "supplier": "Rakoo Learning"},
    {"title": "Database Design Fundamentals", "description": "Learn how to design efficient database schemas", "supplier": "Rakoo Learning"},
    {"title": "Python for Data Science", "description": "Master Python libraries for data analysis and visualization", "supplier": "Tech Academy"},
    {"title": "Docker and Kubernetes Essentials", "description": "Learn container orchestration and deployment", "supplier": "DevOps Institute"},
    {"title": "RESTful API Development", "description": "Build scalable and secure REST APIs", "supplier": "Rakoo Learning"},
    {"title": "GraphQL Fundamentals", "description": "Learn modern API design with GraphQL", "supplier": "Tech Academy"},
    {"title": "AWS Cloud Architecture", "description": "Design and deploy applications on AWS", "supplier": "Cloud Masters"},
    {"title": "Agile Project Management", "description": "Master Scrum and Kanban methodologies", "supplier": "Agile Institute"},
    {"title": "Cybersecurity Basics", "description": "Learn fundamental security principles and practices", "supplier": "Security Pro"},
    {"title": "Machine Learning Introduction", "description": "Get started with ML algorithms and applications", "supplier": "AI Academy"},
    {"title": "Node.js Backend Development", "description": "Build scalable server-side applications", "supplier": "Rakoo Learning"},
    {"title": "UI/UX Design Principles", "description": "Create beautiful and user-friendly interfaces", "supplier": "Design Studio"},
    {"title": "Git and Version Control", "description": "Master Git workflows and collaboration", "supplier": "DevOps Institute"},
    {"title": "SQL Query Optimization", "description": "Write efficient database queries", "supplier": "Database Experts"},
    {"title": "Test-Driven Development", "description": "Write better code with TDD practices", "supplier": "Quality Assurance Pro"},
    {"title": "Microservices Architecture", "description": "Design and implement microservices systems", "supplier": "Cloud Masters"},
    {"title": "DevOps CI/CD Pipelines", "description": "Automate your deployment workflow", "supplier": "DevOps Institute"},
]

SAMPLE_USERS = [
    {"username": "john.doe", "email": "john.doe@example.com", "firstName": "John", "lastName": "Doe", "role": "user"},
    {"username": "jane.smith", "email": "jane.smith@example.com", "firstName": "Jane", "lastName": "Smith", "role": "user"},
    {"username": "bob.manager", "email": "bob.manager@example.com", "firstName": "Bob", "lastName": "Manager", "role": "manager"},
]
