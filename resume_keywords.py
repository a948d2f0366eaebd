# resume_keywords.py
# Weighted ATS keyword list for scanning a resume on its own.

# Every keyword is matched as a whole word, ignoring case. A category's weight
# is what each keyword found in it is worth towards the resume score.

import re
from typing import Dict, Iterator, List

from catalog import rx

CATALOG_VERSION = "2024.1"

KEYWORD_CATEGORIES: List[Dict[str, object]] = [
    {
        "name": "Programming Languages",
        "weight": 1.5,
        "keywords": ["Python", "R", "Java", "C++", "JavaScript", "TypeScript", "Scala", "Julia", "SQL", "MATLAB"],
    },
    {
        "name": "ML/AI Frameworks",
        "weight": 2.0,
        "keywords": [
            "TensorFlow", "PyTorch", "Keras", "Scikit-learn", "XGBoost", "LightGBM", "Hugging Face",
            "OpenCV", "NLTK", "spaCy", "Pandas", "NumPy", "JAX",
        ],
    },
    {
        "name": "Cloud & Infrastructure",
        "weight": 1.5,
        "keywords": [
            "AWS", "Azure", "GCP", "Google Cloud", "Docker", "Kubernetes", "MLflow", "Airflow",
            "Spark", "Databricks", "SageMaker",
        ],
    },
    {
        "name": "ML/AI Techniques",
        "weight": 2.0,
        "keywords": [
            "Machine Learning", "Deep Learning", "Neural Networks", "Natural Language Processing", "NLP",
            "Computer Vision", "Reinforcement Learning", "Supervised Learning", "Unsupervised Learning",
            "Transfer Learning", "Generative AI", "Large Language Models", "LLM", "CNN", "RNN", "LSTM",
            "Transformer", "GPT", "BERT",
        ],
    },
    {
        "name": "Data & Analytics",
        "weight": 1.0,
        "keywords": [
            "Data Analysis", "Data Science", "Big Data", "ETL", "Data Pipeline", "Data Engineering",
            "Data Visualization", "Statistical Analysis", "A/B Testing", "Tableau", "Power BI", "Jupyter",
        ],
    },
    {
        "name": "MLOps & Deployment",
        "weight": 1.5,
        "keywords": [
            "MLOps", "Model Deployment", "CI/CD", "Model Monitoring", "Model Optimization", "REST API",
            "FastAPI", "Flask", "Model Serving", "Production ML",
        ],
    },
    {
        "name": "Soft Skills",
        "weight": 0.8,
        "keywords": [
            "Communication", "Leadership", "Team Collaboration", "Problem Solving", "Critical Thinking",
            "Research", "Presentation", "Stakeholder Management", "Agile", "Scrum",
        ],
    },
]


def _whole_word(keyword: str):
    return rx(rf"(?<!\w){re.escape(keyword)}(?!\w)")


def iter_keyword_rows() -> Iterator[Dict[str, object]]:
    """Flatten the keyword list into catalog rows carrying their category weight."""
    for category in KEYWORD_CATEGORIES:
        for keyword in category["keywords"]:  # type: ignore[union-attr]
            yield {
                "name": keyword,
                "category": category["name"],
                "patterns": [_whole_word(keyword)],
                "weight": category["weight"],
            }
