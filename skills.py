# skills.py
# Unified skills taxonomy used by the skills-gap comparison.

# Each category maps official skill names to their aliases, importance tier and
# optional learning resources. The official name is matched first, then each
# alias in order (case-insensitivity and short-alias word boundaries are handled
# by the catalog loader).

from typing import Dict, Iterator

from catalog import Importance, LearningResource

CATALOG_VERSION = "2024.2"

ESSENTIAL = Importance.ESSENTIAL
IMPORTANT = Importance.IMPORTANT
NICE = Importance.NICE_TO_HAVE


def _course(name: str, url: str, provider: str, is_free: bool = True) -> LearningResource:
    return LearningResource(name, "course", url, provider, is_free)


def _docs(name: str, url: str, provider: str) -> LearningResource:
    return LearningResource(name, "documentation", url, provider, True)


def _cert(name: str, url: str, provider: str) -> LearningResource:
    return LearningResource(name, "certification", url, provider, False)


SKILL_TAXONOMY: Dict[str, Dict[str, object]] = {
    # --- Programming Languages ---
    "Programming Languages": {
        "description": "Core programming languages for AI/ML development",
        "skills": {
            "Python": {
                "aliases": ["python3", "python 3", "py"],
                "importance": ESSENTIAL,
                "resources": [
                    _course("Python for Everybody", "https://www.coursera.org/specializations/python", "Coursera"),
                    _docs("Official Python Tutorial", "https://docs.python.org/3/tutorial/", "Python.org"),
                ],
            },
            "R": {
                "aliases": ["r programming", "r language", "r stats"],
                "importance": IMPORTANT,
                "resources": [
                    _course("R Programming", "https://www.coursera.org/learn/r-programming", "Coursera"),
                ],
            },
            "SQL": {
                "aliases": ["mysql", "postgresql", "postgres", "sqlite", "tsql", "pl/sql"],
                "importance": ESSENTIAL,
                "resources": [
                    _course("SQL for Data Science", "https://www.coursera.org/learn/sql-for-data-science", "Coursera"),
                ],
            },
            "Java": {"aliases": ["java8", "java11", "java17", "jvm"], "importance": IMPORTANT},
            "Scala": {"aliases": ["scala 2", "scala 3"], "importance": NICE},
            "C++": {"aliases": ["cpp", "c plus plus"], "importance": NICE},
            "JavaScript": {"aliases": ["js", "es6", "ecmascript", "node.js", "nodejs"], "importance": NICE},
            "TypeScript": {"aliases": ["ts"], "importance": NICE},
            "Go": {"aliases": ["golang"], "importance": NICE},
            "Rust": {"aliases": ["rust-lang"], "importance": NICE},
            "Julia": {"aliases": ["julialang"], "importance": NICE},
        },
    },
    # --- ML/AI Frameworks ---
    "ML/AI Frameworks": {
        "description": "Machine learning and deep learning frameworks",
        "skills": {
            "TensorFlow": {
                "aliases": ["tf", "tensorflow 2", "tf2"],
                "importance": ESSENTIAL,
                "resources": [
                    _cert("TensorFlow Developer Certificate", "https://www.tensorflow.org/certificate", "Google"),
                    _docs("TensorFlow Tutorials", "https://www.tensorflow.org/tutorials", "TensorFlow"),
                ],
            },
            "PyTorch": {
                "aliases": ["torch", "pytorch lightning"],
                "importance": ESSENTIAL,
                "resources": [
                    _docs("PyTorch Tutorials", "https://pytorch.org/tutorials/", "PyTorch"),
                    _course(
                        "Deep Learning with PyTorch",
                        "https://www.udacity.com/course/deep-learning-pytorch--ud188",
                        "Udacity",
                    ),
                ],
            },
            "Keras": {"aliases": ["keras api"], "importance": IMPORTANT},
            "scikit-learn": {
                "aliases": ["sklearn", "scikit learn"],
                "importance": ESSENTIAL,
                "resources": [
                    _docs(
                        "scikit-learn Tutorials",
                        "https://scikit-learn.org/stable/tutorial/index.html",
                        "scikit-learn",
                    ),
                ],
            },
            "XGBoost": {"aliases": ["xgb"], "importance": IMPORTANT},
            "LightGBM": {"aliases": ["lgbm", "light gbm"], "importance": NICE},
            "Hugging Face": {
                "aliases": ["huggingface", "transformers", "hf"],
                "importance": ESSENTIAL,
                "resources": [
                    _course("Hugging Face Course", "https://huggingface.co/learn", "Hugging Face"),
                ],
            },
            "LangChain": {
                "aliases": ["lang chain"],
                "importance": IMPORTANT,
                "resources": [
                    _docs("LangChain Documentation", "https://python.langchain.com/docs/", "LangChain"),
                ],
            },
            "OpenAI API": {
                "aliases": ["openai", "gpt api", "chatgpt api", "gpt-4", "gpt-3"],
                "importance": IMPORTANT,
            },
            "JAX": {"aliases": ["google jax"], "importance": NICE},
            "ONNX": {"aliases": ["open neural network exchange"], "importance": NICE},
            "Pandas": {"aliases": ["pandas dataframe"], "importance": ESSENTIAL},
            "NumPy": {"aliases": ["numpy array", "np"], "importance": ESSENTIAL},
            "OpenCV": {"aliases": ["cv2", "opencv-python"], "importance": IMPORTANT},
            "spaCy": {"aliases": ["spacy"], "importance": IMPORTANT},
            "NLTK": {"aliases": ["natural language toolkit"], "importance": NICE},
        },
    },
    # --- Cloud Platforms ---
    "Cloud Platforms": {
        "description": "Cloud computing and ML platforms",
        "skills": {
            "AWS": {
                "aliases": ["amazon web services", "sagemaker", "ec2", "s3", "aws lambda"],
                "importance": ESSENTIAL,
                "resources": [
                    _cert(
                        "AWS Machine Learning Specialty",
                        "https://aws.amazon.com/certification/certified-machine-learning-specialty/",
                        "AWS",
                    ),
                    LearningResource("AWS Free Tier", "tutorial", "https://aws.amazon.com/free/", "AWS", True),
                ],
            },
            "Azure": {
                "aliases": ["microsoft azure", "azure ml", "azure machine learning"],
                "importance": IMPORTANT,
                "resources": [
                    _cert(
                        "Azure AI Engineer Associate",
                        "https://learn.microsoft.com/en-us/certifications/azure-ai-engineer/",
                        "Microsoft",
                    ),
                ],
            },
            "GCP": {
                "aliases": ["google cloud", "google cloud platform", "bigquery", "vertex ai", "cloud ai"],
                "importance": IMPORTANT,
                "resources": [
                    _cert(
                        "Google Cloud ML Engineer",
                        "https://cloud.google.com/certification/machine-learning-engineer",
                        "Google",
                    ),
                ],
            },
        },
    },
    # --- Data Tools ---
    "Data Tools": {
        "description": "Data processing and engineering tools",
        "skills": {
            "Spark": {
                "aliases": ["apache spark", "pyspark", "spark sql"],
                "importance": IMPORTANT,
                "resources": [
                    _docs("Apache Spark Documentation", "https://spark.apache.org/docs/latest/", "Apache"),
                ],
            },
            "Hadoop": {"aliases": ["hdfs", "hive", "apache hadoop"], "importance": NICE},
            "Kafka": {"aliases": ["apache kafka", "kafka streams"], "importance": NICE},
            "Airflow": {
                "aliases": ["apache airflow"],
                "importance": IMPORTANT,
                "resources": [
                    _docs("Airflow Documentation", "https://airflow.apache.org/docs/", "Apache"),
                ],
            },
            "dbt": {"aliases": ["data build tool"], "importance": IMPORTANT},
            "Databricks": {"aliases": ["databricks workspace"], "importance": IMPORTANT},
            "Snowflake": {"aliases": ["snowflake data cloud"], "importance": IMPORTANT},
        },
    },
    # --- MLOps & DevOps ---
    "MLOps & DevOps": {
        "description": "ML operations and deployment tools",
        "skills": {
            "Docker": {
                "aliases": ["containerisation", "containerization", "dockerfile"],
                "importance": ESSENTIAL,
                "resources": [
                    _docs("Docker Documentation", "https://docs.docker.com/", "Docker"),
                ],
            },
            "Kubernetes": {
                "aliases": ["k8s", "kubectl"],
                "importance": IMPORTANT,
                "resources": [
                    _docs("Kubernetes Documentation", "https://kubernetes.io/docs/home/", "Kubernetes"),
                ],
            },
            "MLflow": {
                "aliases": ["ml flow"],
                "importance": IMPORTANT,
                "resources": [
                    _docs("MLflow Documentation", "https://mlflow.org/docs/latest/index.html", "MLflow"),
                ],
            },
            "Kubeflow": {"aliases": ["kube flow"], "importance": NICE},
            "Git": {
                "aliases": ["github", "gitlab", "version control", "git version control"],
                "importance": ESSENTIAL,
            },
            "CI/CD": {
                "aliases": ["cicd", "continuous integration", "continuous deployment", "github actions", "jenkins"],
                "importance": IMPORTANT,
            },
            "Terraform": {"aliases": ["infrastructure as code", "iac"], "importance": NICE},
            "FastAPI": {"aliases": ["fast api"], "importance": IMPORTANT},
            "Flask": {"aliases": ["flask api"], "importance": NICE},
        },
    },
    # --- AI/ML Techniques ---
    "AI/ML Techniques": {
        "description": "Machine learning concepts and methodologies",
        "skills": {
            "Machine Learning": {
                "aliases": ["ml", "statistical learning"],
                "importance": ESSENTIAL,
                "resources": [
                    _course(
                        "Machine Learning by Andrew Ng",
                        "https://www.coursera.org/learn/machine-learning",
                        "Coursera",
                    ),
                ],
            },
            "Deep Learning": {
                "aliases": ["dl", "neural networks", "neural network"],
                "importance": ESSENTIAL,
                "resources": [
                    _course(
                        "Deep Learning Specialization",
                        "https://www.coursera.org/specializations/deep-learning",
                        "Coursera",
                    ),
                ],
            },
            "NLP": {
                "aliases": ["natural language processing", "text mining", "text analytics", "nlp models"],
                "importance": IMPORTANT,
                "resources": [
                    _course(
                        "NLP Specialization",
                        "https://www.coursera.org/specializations/natural-language-processing",
                        "Coursera",
                    ),
                ],
            },
            "Computer Vision": {
                "aliases": ["cv", "image recognition", "object detection", "image classification"],
                "importance": IMPORTANT,
            },
            "LLMs": {
                "aliases": ["large language models", "llm", "generative ai", "gen ai", "genai"],
                "importance": ESSENTIAL,
            },
            "Transformers": {
                "aliases": ["transformer architecture", "attention mechanism", "bert", "gpt"],
                "importance": IMPORTANT,
            },
            "Reinforcement Learning": {"aliases": ["rl", "reward learning"], "importance": NICE},
            "Time Series": {
                "aliases": ["time series analysis", "forecasting", "arima", "prophet"],
                "importance": IMPORTANT,
            },
            "Recommendation Systems": {
                "aliases": ["recommender systems", "collaborative filtering", "content-based filtering"],
                "importance": NICE,
            },
            "RAG": {
                "aliases": ["retrieval augmented generation", "retrieval-augmented generation"],
                "importance": IMPORTANT,
            },
            "Fine-tuning": {
                "aliases": ["fine tuning", "finetuning", "model fine-tuning"],
                "importance": IMPORTANT,
            },
            "Prompt Engineering": {"aliases": ["prompt design", "prompt optimization"], "importance": IMPORTANT},
            "Feature Engineering": {"aliases": ["feature extraction", "feature selection"], "importance": ESSENTIAL},
            "Model Evaluation": {
                "aliases": ["model validation", "cross-validation", "hyperparameter tuning"],
                "importance": ESSENTIAL,
            },
        },
    },
    # --- Databases ---
    "Databases": {
        "description": "Database technologies",
        "skills": {
            "PostgreSQL": {"aliases": ["postgres"], "importance": IMPORTANT},
            "MongoDB": {"aliases": ["mongo", "nosql"], "importance": NICE},
            "Redis": {"aliases": ["redis cache"], "importance": NICE},
            "Elasticsearch": {"aliases": ["elastic search", "elastic"], "importance": NICE},
            "Vector Databases": {
                "aliases": ["pinecone", "weaviate", "chroma", "pgvector", "milvus", "qdrant"],
                "importance": IMPORTANT,
            },
        },
    },
    # --- Soft Skills ---
    "Soft Skills": {
        "description": "Professional and interpersonal skills",
        "skills": {
            "Communication": {
                "aliases": [
                    "communication skills",
                    "written communication",
                    "verbal communication",
                    "stakeholder communication",
                ],
                "importance": ESSENTIAL,
            },
            "Leadership": {
                "aliases": ["team leadership", "technical leadership", "mentoring", "mentor"],
                "importance": IMPORTANT,
            },
            "Problem Solving": {
                "aliases": ["problem-solving", "analytical thinking", "critical thinking"],
                "importance": ESSENTIAL,
            },
            "Collaboration": {"aliases": ["teamwork", "cross-functional", "collaborative"], "importance": ESSENTIAL},
            "Agile": {"aliases": ["scrum", "sprint", "kanban", "agile methodology"], "importance": IMPORTANT},
            "Research": {
                "aliases": ["research skills", "literature review", "academic research"],
                "importance": IMPORTANT,
            },
            "Presentation": {
                "aliases": ["presentation skills", "public speaking", "data storytelling"],
                "importance": IMPORTANT,
            },
        },
    },
}


def iter_skill_rows() -> Iterator[Dict[str, object]]:
    """Flatten the taxonomy into catalog rows, official name first."""
    for category, block in SKILL_TAXONOMY.items():
        for name, info in block["skills"].items():  # type: ignore[union-attr]
            yield {
                "name": name,
                "category": category,
                "patterns": [name, *info.get("aliases", [])],
                "tier": info.get("importance", NICE),
                "resources": info.get("resources", []),
            }


def category_descriptions() -> Dict[str, str]:
    return {category: str(block.get("description", "")) for category, block in SKILL_TAXONOMY.items()}
