import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    LLM_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    LLM_BASE_URL: str = os.getenv("LLM_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai/")
    LLM_MODEL: str = os.getenv("LLM_MODEL", "gemini-1.5-flash")
    LLM_TEMPERATURE: float = float(os.getenv("LLM_TEMPERATURE", "0.4"))
    LLM_MAX_TOKENS: int = int(os.getenv("LLM_MAX_TOKENS", "2000"))
    LLM_TIMEOUT: float = float(os.getenv("LLM_TIMEOUT", "60"))
    REVEAL_THRESHOLD: float = float(os.getenv("REVEAL_THRESHOLD", "0.3"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    DEFAULT_QUERY: str = (
        "SELECT\n"
        "    c.Name AS CustomerName,\n"
        "    COUNT(o.OrderID) AS NumberOfOrders,\n"
        "    SUM(o.Amount) AS TotalSpent\n"
        "FROM\n"
        "    Customers c\n"
        "JOIN\n"
        "    Orders o ON c.CustomerID = o.CustomerID\n"
        "WHERE\n"
        "    c.Country = 'USA'\n"
        "GROUP BY\n"
        "    c.Name\n"
        "ORDER BY\n"
        "    TotalSpent DESC\n"
        "LIMIT 1;"
    )

config = Config()
