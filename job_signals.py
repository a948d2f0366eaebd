# job_signals.py
# Signal tables for decoding job postings: skills, experience levels, salary
# hints, red flags and benefits.

# Plain strings are literal aliases; rx() marks a regular expression. Matching
# is case-insensitive and literals of three characters or fewer only match as
# whole words.

from typing import Dict, List

from catalog import Severity, rx

CATALOG_VERSION = "2024.2"

PAY_RANGE_CATEGORY = "Pay Range"

NO_SALARY_HINT = "No salary information"
NO_SALARY_INTERPRETATION = "Salary not mentioned - you'll need to ask directly or research market rates."

# Phrases that mark the text right after them as optional rather than required.
NICE_TO_HAVE_INDICATORS = (
    "nice to have",
    "nice-to-have",
    "preferred",
    "bonus",
    "plus",
    "advantageous",
    "desirable",
    "ideally",
    "would be great",
    "good to have",
    "not essential",
    "optional",
    "a plus",
    "an advantage",
)


def _skill(name: str, category: str, *patterns) -> Dict[str, object]:
    return {"name": name, "category": category, "patterns": list(patterns)}


LANGUAGES = "Programming Languages"
FRAMEWORKS = "ML/AI Frameworks"
CLOUD = "Cloud Platforms"
DATA = "Data Tools"
MLOPS = "MLOps & DevOps"
TECHNIQUES = "AI/ML Techniques"
DATABASES = "Databases"
SOFT = "Soft Skills"

SKILL_PATTERNS: List[Dict[str, object]] = [
    # --- Programming Languages ---
    _skill("Python", LANGUAGES, "python"),
    _skill("R", LANGUAGES, "r", "r programming", "r language"),
    _skill("SQL", LANGUAGES, "sql", "mysql", "postgresql", "postgres"),
    _skill("Java", LANGUAGES, rx(r"\bjava\b")),
    _skill("Scala", LANGUAGES, "scala"),
    _skill("C++", LANGUAGES, "c++", "cpp"),
    _skill("JavaScript", LANGUAGES, "javascript", "js"),
    _skill("TypeScript", LANGUAGES, "typescript", "ts"),
    _skill("Go", LANGUAGES, rx(r"\bgolang\b"), rx(r"\bgo\b(?!od)")),
    _skill("Rust", LANGUAGES, rx(r"\brust\b")),
    _skill("Julia", LANGUAGES, rx(r"\bjulia\b")),
    # --- ML/AI Frameworks ---
    _skill("TensorFlow", FRAMEWORKS, "tensorflow", rx(r"tf\.")),
    _skill("PyTorch", FRAMEWORKS, "pytorch", "torch"),
    _skill("Keras", FRAMEWORKS, "keras"),
    _skill("scikit-learn", FRAMEWORKS, "scikit-learn", "sklearn", "scikit learn"),
    _skill("XGBoost", FRAMEWORKS, "xgboost"),
    _skill("LightGBM", FRAMEWORKS, "lightgbm"),
    _skill("Hugging Face", FRAMEWORKS, "hugging face", "huggingface", "transformers library"),
    _skill("LangChain", FRAMEWORKS, "langchain"),
    _skill("OpenAI API", FRAMEWORKS, "openai", "gpt-4", "gpt-3", "chatgpt api"),
    _skill("JAX", FRAMEWORKS, "jax"),
    _skill("ONNX", FRAMEWORKS, "onnx"),
    # --- Cloud Platforms ---
    _skill("AWS", CLOUD, "aws", "amazon web services", "sagemaker", "ec2", "s3"),
    _skill("Azure", CLOUD, "azure", "microsoft azure"),
    _skill("GCP", CLOUD, "gcp", "google cloud", "bigquery", "vertex ai"),
    # --- Data Tools ---
    _skill("Spark", DATA, "spark", "pyspark", "apache spark"),
    _skill("Hadoop", DATA, "hadoop", "hdfs", rx(r"\bhive\b")),
    _skill("Kafka", DATA, "kafka"),
    _skill("Airflow", DATA, "airflow"),
    _skill("dbt", DATA, "dbt", "data build tool"),
    _skill("Databricks", DATA, "databricks"),
    _skill("Snowflake", DATA, "snowflake"),
    _skill("Pandas", DATA, "pandas"),
    _skill("NumPy", DATA, "numpy"),
    # --- MLOps & DevOps ---
    _skill("Docker", MLOPS, "docker", "containerisation", "containerization"),
    _skill("Kubernetes", MLOPS, "kubernetes", "k8s"),
    _skill("MLflow", MLOPS, "mlflow"),
    _skill("Kubeflow", MLOPS, "kubeflow"),
    _skill("Git", MLOPS, "git", "github", "gitlab", "version control"),
    _skill("CI/CD", MLOPS, "ci/cd", "cicd", "continuous integration", "continuous deployment"),
    _skill("Terraform", MLOPS, "terraform"),
    _skill("Jenkins", MLOPS, "jenkins"),
    # --- AI/ML Techniques ---
    _skill("Machine Learning", TECHNIQUES, "machine learning", "ml"),
    _skill("Deep Learning", TECHNIQUES, "deep learning", "neural network", "dl"),
    _skill("NLP", TECHNIQUES, "nlp", "natural language processing", "text mining", "text analytics"),
    _skill("Computer Vision", TECHNIQUES, "computer vision", "image recognition", "object detection", "cv"),
    _skill("LLMs", TECHNIQUES, "llm", "large language model", "generative ai", "gen ai"),
    _skill("Transformers", TECHNIQUES, "transformer", "attention mechanism", rx(r"\bbert\b"), "gpt"),
    _skill("Reinforcement Learning", TECHNIQUES, "reinforcement learning", "rl"),
    _skill("Time Series", TECHNIQUES, "time series", "forecasting", "arima", "prophet"),
    _skill(
        "Recommendation Systems", TECHNIQUES, "recommendation system", "recommender", "collaborative filtering"
    ),
    _skill("RAG", TECHNIQUES, "rag", "retrieval augmented", "retrieval-augmented"),
    _skill("Fine-tuning", TECHNIQUES, "fine-tuning", "fine tuning", "finetuning"),
    _skill("Prompt Engineering", TECHNIQUES, "prompt engineering", "prompt design"),
    # --- Databases ---
    _skill("PostgreSQL", DATABASES, "postgresql", "postgres"),
    _skill("MongoDB", DATABASES, "mongodb", "mongo"),
    _skill("Redis", DATABASES, "redis"),
    _skill("Elasticsearch", DATABASES, "elasticsearch", "elastic search"),
    _skill(
        "Vector Databases", DATABASES, "pinecone", "weaviate", "chroma", "vector database", "pgvector", "milvus"
    ),
    # --- Soft Skills ---
    _skill("Communication", SOFT, "communication skills", "communicate effectively", "stakeholder communication"),
    _skill("Leadership", SOFT, "leadership", "lead a team", "team lead", "mentor"),
    _skill("Problem Solving", SOFT, "problem solving", "problem-solving", "analytical thinking"),
    _skill("Collaboration", SOFT, "collaboration", "collaborative", "cross-functional", "work closely with"),
    _skill("Agile", SOFT, "agile", "scrum", "sprint", "kanban"),
]

# Experience levels. The years range is kept in "detail".
EXPERIENCE_PATTERNS: List[Dict[str, object]] = [
    {
        "name": "Entry Level / Graduate",
        "category": "Experience",
        "detail": "0-2 years",
        "patterns": [
            "entry level", "entry-level", "graduate", "new grad", "0-1 year", "0-2 year",
            "junior", "no experience required", "recent graduate", "intern", "internship",
            "early career", "starting your career",
        ],
    },
    {
        "name": "Junior",
        "category": "Experience",
        "detail": "1-3 years",
        "patterns": [
            "junior", "1-2 year", "1-3 year", "2 years experience", "1+ year",
            "some experience", "early in your career",
        ],
    },
    {
        "name": "Mid-Level",
        "category": "Experience",
        "detail": "3-5 years",
        "patterns": [
            "mid-level", "mid level", "intermediate", "2-5 year", "3-5 year",
            "3+ year", "4+ year", "several years", "proven experience",
        ],
    },
    {
        "name": "Senior",
        "category": "Experience",
        "detail": "5-10 years",
        "patterns": [
            "senior", "5+ year", "5-7 year", "5-10 year", "6+ year", "7+ year",
            "extensive experience", "strong experience", "deep experience", "significant experience",
        ],
    },
    {
        "name": "Lead / Staff",
        "category": "Experience",
        "detail": "8+ years",
        "patterns": [
            "lead", "staff", "principal", "8+ year", "10+ year", "tech lead",
            "team lead", "architect", "expert level",
        ],
    },
    {
        "name": "Director / Head",
        "category": "Experience",
        "detail": "10+ years",
        "patterns": [
            "director", "head of", rx(r"\bvp\b"), "vice president", "chief", "cto", "cdo",
            "executive", "c-level", "10+ year", "15+ year",
        ],
    },
]

SALARY_HINTS: List[Dict[str, object]] = [
    {
        "name": "Competitive salary mentioned",
        "category": "Base Pay",
        "patterns": ["competitive salary", "competitive compensation", "competitive package", "competitive remuneration"],
        "detail": "Usually means market rate or slightly above. Worth asking for specific range.",
    },
    {
        "name": "Salary range provided",
        "category": PAY_RANGE_CATEGORY,
        "patterns": [rx(r"\$\d+[k,]"), rx(r"\d+k\s?-\s?\d+k"), "salary range", rx(r"\d+,000")],
        "detail": "Transparent about pay - a positive sign.",
    },
    {
        "name": "Equity/Stock options mentioned",
        "category": "Equity",
        "patterns": ["equity", "stock option", "shares", "esop", "rsu", "ownership"],
        "detail": "Common in startups and tech companies. Can significantly increase total compensation.",
    },
    {
        "name": "Bonus structure mentioned",
        "category": "Bonus",
        "patterns": ["bonus", "performance bonus", "annual bonus", "incentive"],
        "detail": "Additional compensation tied to performance. Ask about typical bonus percentages.",
    },
    {
        "name": "Benefits emphasized",
        "category": "Benefits",
        "patterns": ["generous benefits", "comprehensive benefits", "great benefits", "benefits package"],
        "detail": "May compensate for lower base salary with strong benefits.",
    },
]

RED_FLAGS: List[Dict[str, object]] = [
    {
        "name": "Unrealistic expectations",
        "category": "Culture",
        "tier": Severity.MEDIUM,
        "patterns": ["rockstar", "ninja", "guru", "wizard", "unicorn", "superhero", "10x developer"],
        "detail": "These terms often signal unrealistic expectations or an immature hiring culture.",
    },
    {
        "name": "Work-life balance concerns",
        "category": "Workload",
        "tier": Severity.MEDIUM,
        "patterns": [
            "fast-paced", "fast paced", "high pressure", "tight deadlines",
            "demanding environment", "hustle", "grinding",
        ],
        "detail": "May indicate long hours, high stress, or poor work-life balance.",
    },
    {
        "name": "Vague responsibilities",
        "category": "Role Definition",
        "tier": Severity.MEDIUM,
        "patterns": [
            "wear many hats", "various duties", "other duties as assigned",
            "do whatever it takes", "jack of all trades",
        ],
        "detail": "Unclear role definition may lead to scope creep or being stretched too thin.",
    },
    {
        "name": "Potential understaffing",
        "category": "Workload",
        "tier": Severity.LOW,
        "patterns": ["small team", "lean team", "startup mentality", "scrappy", "do more with less", "resource constrained"],
        "detail": "May mean you'll be doing multiple jobs or lacking support.",
    },
    {
        "name": "Family language",
        "category": "Culture",
        "tier": Severity.MEDIUM,
        "patterns": ["we're a family", "like a family", "family environment", "family culture"],
        "detail": "Often used to justify overwork, blur professional boundaries, or guilt employees.",
    },
    {
        "name": "Unpaid overtime hints",
        "category": "Workload",
        "tier": Severity.LOW,
        "patterns": ["above and beyond", "go the extra mile", "whatever it takes", "flexible hours", "occasional weekend"],
        "detail": "May suggest expectation of unpaid overtime or poor boundaries.",
    },
    {
        "name": "High turnover signals",
        "category": "Hiring",
        "tier": Severity.LOW,
        "patterns": ["immediate start", "urgent hire", "asap", "quick turnaround", "hit the ground running"],
        "detail": "Urgency may indicate high turnover or poor planning. Ask why the role is open.",
    },
    {
        "name": "Overqualified for pay",
        "category": "Compensation",
        "tier": Severity.LOW,
        "patterns": ["phd required", "phd preferred", "doctoral"],
        "detail": "PhD requirements for non-research roles may indicate underpaying for expertise.",
    },
    {
        "name": "Excessive requirements",
        "category": "Role Definition",
        "tier": Severity.MEDIUM,
        "patterns": ["must have all", "extensive experience in all", "expert in all"],
        "detail": "Unrealistic requirement lists may indicate the employer doesn't understand the role.",
    },
    {
        "name": "No remote/flexibility mentioned",
        "category": "Work Arrangement",
        "tier": Severity.LOW,
        "patterns": ["on-site only", "office based", "in-office", "no remote", "must be located"],
        "detail": "Not necessarily a red flag, but worth confirming flexibility if important to you.",
    },
]

BENEFIT_PATTERNS: List[Dict[str, object]] = [
    {
        "name": "Remote Work",
        "category": "Work Arrangement",
        "patterns": ["remote", "work from home", "wfh", "hybrid", "flexible location"],
    },
    {
        "name": "Flexible Hours",
        "category": "Work Arrangement",
        "patterns": ["flexible hours", "flexible schedule", "flextime", "flex time"],
    },
    {
        "name": "Learning Budget",
        "category": "Growth",
        "patterns": ["learning budget", "training budget", "professional development", "conference", "upskilling"],
    },
    {
        "name": "Health Insurance",
        "category": "Health",
        "patterns": ["health insurance", "medical insurance", "private health", "health cover"],
    },
    {
        "name": "Parental Leave",
        "category": "Family",
        "patterns": ["parental leave", "maternity", "paternity", "family leave"],
    },
    {
        "name": "Superannuation",
        "category": "Financial",
        "patterns": ["superannuation", "super contribution", "above award super"],
    },
    {
        "name": "Equity",
        "category": "Financial",
        "patterns": ["equity", "stock option", "shares", "esop", "ownership stake"],
    },
    {
        "name": "Annual Leave",
        "category": "Leave",
        "patterns": ["annual leave", "vacation", "pto", "paid time off", "4 weeks", "5 weeks"],
    },
    {
        "name": "Wellbeing",
        "category": "Health",
        "patterns": ["wellbeing", "wellness", "mental health", "gym", "fitness"],
    },
    {
        "name": "Team Events",
        "category": "Culture",
        "patterns": ["team event", "team building", "social", "friday drinks", "team lunch"],
    },
]
