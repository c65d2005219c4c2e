from setuptools import setup, find_packages

setup(
    name="profile-registration-backend",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"api": ["templates/*.html"]},
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "boto3>=1.26.0",
        "botocore>=1.29.0",
        "pydantic>=2.0.0",
        "typing-extensions>=4.5.0",
        "fastapi>=0.110.0",
        "uvicorn>=0.23.0",
        "jinja2>=3.1.0",
        "python-multipart>=0.0.9",
        "itsdangerous>=2.1.0",
        "httpx>=0.25.0",
    ],
    extras_require={
        "dev": [
            "mypy>=1.0.0",
            "types-boto3>=1.0.0",
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "isort>=5.0.0",
            "flake8>=6.0.0"
        ]
    },
    entry_points={
        "console_scripts": [
            "profile-api=api.app:main",
            "profile-client=clients.profile_client:main",
        ]
    }
)
