"""
Exceções da camada de configuração.

Todas herdam de `ConfigError` e representam falhas estruturais fatais,
detectadas antes de qualquer Task executar. Não confundir com
uma lacuna de configuração em runtime (`CONFIGURATION_GAP`), que é recuperável
e resulta em SKIPPED.
"""


class ConfigError(Exception):
    """Base dos erros de carregamento e resolução de configuração."""


class DefaultsNotFoundError(ConfigError):
    """
    O arquivo de defaults não existe no caminho informado.

    O arquivo de defaults é obrigatório; não há defaults implícitos.
    """


class UnsupportedConfigFormatError(ConfigError):
    """Extensão de arquivo fora de `.yaml`, `.yml` e `.json`."""


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz do arquivo (ou de uma seção obrigatória) não é um dict."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo:
        - base:     {"warehouse": {"create_table_if_missing": false}}
        - override: {"warehouse": "prod"}

    Nenhum merge parcial é produzido.
    """


class InvalidTableBindingError(ConfigError):
    """
    A seção `warehouse.tables` associa uma tabela a um entry type desconhecido.

    O conjunto de entry types é fechado; nomes fora dele indicam erro de
    digitação na configuração e nunca são ignorados silenciosamente.
    """


class InvalidPolicyValueError(ConfigError):
    """
    Uma política booleana recebeu valor que não é bool.

    Exemplo:
        - create_table_if_missing: "false"   (string, não bool)

    Strings nunca são interpretadas: `bool("false")` é True e ligaria a
    criação de recursos no warehouse.
    """
