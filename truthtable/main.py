from truthtable import create_app
from truthtable.config import SERVER_CONFIG, validate_config
import uvicorn
from fastapi.middleware.cors import CORSMiddleware

validate_config()
app = create_app()
# Operators: ~ ! ^ * v + -> <->, constants 0 1 F T, every other character is a one-letter variable.
# example: '(p ^ q) -> ~r' '(1 * 0) + 1'

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # or specify your frontend URL(s)
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if __name__ == "__main__":
    # http://127.0.0.1:8000/docs
    uvicorn.run(
        "truthtable.main:app",
        host=SERVER_CONFIG["host"],
        port=SERVER_CONFIG["port"],
        reload=SERVER_CONFIG["reload"],
    )
