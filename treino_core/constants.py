"""Constants for the Treino Core package."""

import re

# Key under which the serialized entries live in the blob store
STORAGE_KEY = "controleTreinoEntries"

# Time and date formats
DATE_FORMAT = "%Y-%m-%d"
TIME_RE = re.compile(r'^(\d{1,2}):(\d{2})(?::(\d{2}))?$')
MINUTES_PER_DAY = 24 * 60

# CSV export
CSV_HEADER = [
    "Data",
    "Inicio",
    "Fim",
    "Exercicio",
    "Series",
    "Repeticoes",
    "Carga (kg)",
    "Volume",
    "Descanso (s)",
    "Duracao",
    "RPE",
    "Observacoes",
]
EXPORT_FILENAME_PREFIX = "treinos_"
EXPORT_FILENAME_EXTENSION = ".csv"

# Column headings of the entries table
TABLE_HEADER = [
    "Data", "Início", "Fim", "Exercício", "Séries", "Repetições",
    "Carga (kg)", "Volume", "Descanso (s)", "Duração", "RPE", "Observações",
]

# User-facing messages
MSG_REQUIRED_FIELDS = "Preencha todos os campos obrigatórios."
MSG_NOTHING_TO_EXPORT = "Não há dados para exportar."
MSG_CONFIRM_CLEAR = "Tem certeza de que deseja apagar todos os registros?"
MSG_EMPTY_SUMMARY = "Nenhum registro salvo."

# Default configuration values
DEFAULT_CONFIG_PATH = "~/.config/controle_treino/config.yaml"
DEFAULT_DATA_FILE = "~/.local/share/controle_treino/storage.json"
DEFAULT_EXPORT_DIR = "."
DEFAULT_LOG_LEVEL = "INFO"
DATA_FILE_ENV_VAR = "TREINO_DATA_FILE"
