from drills.package_builder import (
    Dependency,
    Language,
    Package,
    PackageBuilder,
)


def test_defaults():
    package = PackageBuilder("base64").build()
    assert package == Package("base64", "0.1", [], [], None)


def test_version_and_language():
    log = PackageBuilder("log").version("0.4").language(Language.RUST).build()
    assert log.name == "log"
    assert log.version == "0.4"
    assert log.language is Language.RUST


def test_as_dependency_uses_name_and_version():
    base64 = PackageBuilder("base64").version("0.13").build()
    assert base64.as_dependency() == Dependency("base64", "0.13")


def test_full_example():
    base64 = PackageBuilder("base64").version("0.13").build()
    log = PackageBuilder("log").version("0.4").language(Language.RUST).build()
    serde = (
        PackageBuilder("serde")
        .authors(["djmitche"])
        .version("4.0")
        .dependency(base64.as_dependency())
        .dependency(log.as_dependency())
        .build()
    )
    assert serde.authors == ["djmitche"]
    assert serde.version == "4.0"
    assert serde.dependencies == [
        Dependency("base64", "0.13"),
        Dependency("log", "0.4"),
    ]
    assert serde.language is None


def test_dependencies_keep_order():
    first = Dependency("a", "1")
    second = Dependency("b", "2")
    package = PackageBuilder("p").dependency(second).dependency(first).build()
    assert package.dependencies == [second, first]


def test_built_package_is_independent_of_builder():
    builder = PackageBuilder("p").dependency(Dependency("a", "1"))
    first = builder.build()
    builder.dependency(Dependency("b", "2"))
    assert first.dependencies == [Dependency("a", "1")]
    assert len(builder.build().dependencies) == 2


def test_authors_list_is_copied():
    authors = ["alice"]
    package = PackageBuilder("p").authors(authors).build()
    authors.append("bob")
    assert package.authors == ["alice"]