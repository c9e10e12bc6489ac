"""
SQL Topics — the sample tables and every worked example shown by the
visualizer. Result tables are derived from the base tables once, at import
time; nothing here is evaluated per request.
"""

from sqlviz.catalog import Catalog, Example, Step, Topic, row, table


# ── Base tables ────────────────────────────────────────────────────────

CUSTOMERS = table("Customers", ["CustomerID", "Name", "Country"], [
    row(CustomerID=1, Name="Alice", Country="USA"),
    row(CustomerID=2, Name="Bob", Country="Canada"),
    row(CustomerID=3, Name="Charlie", Country="USA"),
    row(CustomerID=4, Name="Diana", Country="UK"),
])

ORDERS = table("Orders", ["OrderID", "Product", "Amount", "CustomerID"], [
    row(OrderID=101, Product="Laptop", Amount=1200, CustomerID=1),
    row(OrderID=102, Product="Mouse", Amount=25, CustomerID=2),
    row(OrderID=103, Product="Keyboard", Amount=75, CustomerID=1),
    row(OrderID=104, Product="Monitor", Amount=300, CustomerID=3),
    row(OrderID=105, Product="Webcam", Amount=50, CustomerID=5),  # no such customer
])

EMPLOYEES = table("Employees", ["EmployeeID", "Name", "Department", "Salary"], [
    row(EmployeeID=104, Name="Ivan", Department="Engineering", Salary=110000),
    row(EmployeeID=103, Name="Heidi", Department="Engineering", Salary=95000),
    row(EmployeeID=105, Name="Judy", Department="HR", Salary=60000),
    row(EmployeeID=106, Name="Mallory", Department="Sales", Salary=80000),
    row(EmployeeID=102, Name="Grace", Department="Sales", Salary=75000),
    row(EmployeeID=101, Name="Frank", Department="Sales", Salary=75000),  # salary tie
])


# ── Helpers ────────────────────────────────────────────────────────────

# Ordered by first appearance, so the subquery list reads 1, 2, 3, 5.
CUSTOMER_IDS_IN_ORDERS = list(dict.fromkeys(r.get("CustomerID") for r in ORDERS.rows))
CUSTOMER_IDS_IN_CUSTOMERS = {r.get("CustomerID") for r in CUSTOMERS.rows}


def _where(source, predicate, name="Result", **flags):
    rows = [r.flagged(**flags) if flags else r for r in source.rows if predicate(r)]
    return table(name, source.columns, rows)


def _base(text="Start with the base table `Customers`.", source=CUSTOMERS, query="-- Base Table"):
    return Step(explanation=text, query=query, tables=(source,))


def _match_customers(mark_unmatched: bool):
    def mark(r):
        has_match = r.get("CustomerID") in CUSTOMER_IDS_IN_ORDERS
        if mark_unmatched:
            return r.flagged(highlight=has_match, unmatched=not has_match)
        return r.flagged(highlight=has_match)
    return CUSTOMERS.with_rows(mark(r) for r in CUSTOMERS.rows)


def _match_orders(mark_unmatched: bool):
    def mark(r):
        has_match = r.get("CustomerID") in CUSTOMER_IDS_IN_CUSTOMERS
        if mark_unmatched:
            return r.flagged(highlight=has_match, unmatched=not has_match)
        return r.flagged(highlight=has_match)
    return ORDERS.with_rows(mark(r) for r in ORDERS.rows)


_MATCHED_NAME_PRODUCT = [
    row(Name="Alice", Product="Laptop", highlight=True),
    row(Name="Alice", Product="Keyboard", highlight=True),
    row(Name="Bob", Product="Mouse", highlight=True),
    row(Name="Charlie", Product="Monitor", highlight=True),
]


def _by_department_then_salary(rows):
    return sorted(rows, key=lambda r: (r.get("Department"), -r.get("Salary")))


# ── Topics ─────────────────────────────────────────────────────────────

SELECT = Topic(
    description="The SELECT statement is used to query the database and retrieve data that matches criteria that you specify.",
    syntax="SELECT column1, column2, ...\nFROM table_name;",
    use_case="Use it anytime you need to fetch data from a table, whether it's all columns (*) or a specific subset of columns.",
    examples=(
        Example(title="Select all columns", steps=(
            _base(),
            Step(
                explanation="The `SELECT *` statement retrieves all columns from the table.",
                query="SELECT * FROM Customers;",
                tables=(CUSTOMERS.renamed("Result"),),
            ),
        )),
        Example(title="Select specific columns", steps=(
            _base(),
            Step(
                explanation="Specify the column names `Name` and `Country` to retrieve only that data.",
                query="SELECT Name, Country FROM Customers;",
                tables=(table("Result", ["Name", "Country"],
                              [r.project("Name", "Country") for r in CUSTOMERS.rows]),),
            ),
        )),
        Example(title="Select with alias", steps=(
            _base(),
            Step(
                explanation="Use `AS` to rename a column in the output. Here `Name` is renamed to `CustomerName`.",
                query="SELECT Name AS CustomerName FROM Customers;",
                tables=(table("Result", ["CustomerName"],
                              [r.project(CustomerName="Name") for r in CUSTOMERS.rows]),),
            ),
        )),
    ),
)

WHERE = Topic(
    description="The WHERE clause is used to filter records. It extracts only those records that fulfill a specified condition.",
    syntax="SELECT column1, column2, ...\nFROM table_name\nWHERE condition;",
    use_case="Use it to narrow down the results of a query, such as finding all customers from a specific country or orders over a certain amount.",
    examples=(
        Example(title="Filter with a string value", steps=(
            _base(),
            Step(
                explanation="The `WHERE` clause filters rows based on a condition. Here, we keep only rows where `Country` is 'USA'.",
                query="SELECT * FROM Customers WHERE Country = 'USA';",
                tables=(_where(CUSTOMERS, lambda r: r.get("Country") == "USA", highlight=True),),
            ),
        )),
        Example(title="Filter with a numeric value", steps=(
            _base("Start with the base table `Orders`.", ORDERS),
            Step(
                explanation="The `WHERE` clause filters rows where `Amount` is greater than 100.",
                query="SELECT * FROM Orders WHERE Amount > 100;",
                tables=(_where(ORDERS, lambda r: r.get("Amount") > 100, highlight=True),),
            ),
        )),
    ),
)

INNER_JOIN = Topic(
    description="The INNER JOIN keyword selects records that have matching values in both tables. It is the most common type of join.",
    syntax="SELECT columns\nFROM table1\nINNER JOIN table2 ON table1.column = table2.column;",
    use_case="Use it to combine rows from two or more tables based on a related column between them, like getting customer names and the products they ordered.",
    examples=(
        Example(title="Join Customers and Orders", steps=(
            Step(
                explanation="Start with the two base tables. Rows that have a matching `CustomerID` in the other table are highlighted.",
                query="-- Base Tables",
                tables=(_match_customers(False), _match_orders(False)),
            ),
            Step(
                explanation="Perform an `INNER JOIN` on `CustomerID`. Only rows with matching `CustomerID` in both tables are included.",
                query="SELECT C.Name, O.Product, O.Amount\nFROM Customers C\nINNER JOIN Orders O ON C.CustomerID = O.CustomerID;",
                tables=(table("Result", ["Name", "Product", "Amount"], [
                    row(Name="Alice", Product="Laptop", Amount=1200, highlight=True),
                    row(Name="Bob", Product="Mouse", Amount=25, highlight=True),
                    row(Name="Alice", Product="Keyboard", Amount=75, highlight=True),
                    row(Name="Charlie", Product="Monitor", Amount=300, highlight=True),
                ]),),
            ),
        )),
    ),
)

LEFT_JOIN = Topic(
    description="The LEFT JOIN keyword returns all records from the left table (table1), and the matching records from the right table (table2). The result is NULL from the right side if there is no match.",
    syntax="SELECT columns\nFROM table1\nLEFT JOIN table2 ON table1.column = table2.column;",
    use_case="Use it when you want to see all records from one table, regardless of whether they have a match in the second table. For example, to list all customers and any orders they may have placed.",
    examples=(
        Example(title="Join Customers and Orders", steps=(
            Step(
                explanation="Start with the two base tables. All rows from the left table (`Customers`) will be included. Rows with a match are green; rows without a match are red.",
                query="-- Base Tables",
                tables=(_match_customers(True), _match_orders(False)),
            ),
            Step(
                explanation="A `LEFT JOIN` returns all records from the left table (`Customers`), and the matched records from the right table (`Orders`). Rows in `Customers` with no matching order will have `NULL` for order columns.",
                query="SELECT C.Name, O.Product\nFROM Customers C\nLEFT JOIN Orders O ON C.CustomerID = O.CustomerID;",
                tables=(table("Result", ["Name", "Product"], _MATCHED_NAME_PRODUCT + [
                    row(Name="Diana", Product=None, unmatched=True),
                ]),),
            ),
        )),
    ),
)

RIGHT_JOIN = Topic(
    description="The RIGHT JOIN keyword returns all records from the right table (table2), and the matching records from the left table (table1). The result is NULL from the left side when there is no match.",
    syntax="SELECT columns\nFROM table1\nRIGHT JOIN table2 ON table1.column = table2.column;",
    use_case="This is less common, but useful when you want all records from the second table. For instance, showing all orders, even if the customer who placed it has been deleted.",
    examples=(
        Example(title="Join Customers and Orders", steps=(
            Step(
                explanation="Start with the two base tables. All rows from the right table (`Orders`) will be included. Rows with a match are green; rows without a match are red.",
                query="-- Base Tables",
                tables=(_match_customers(False), _match_orders(True)),
            ),
            Step(
                explanation="A `RIGHT JOIN` returns all records from the right table (`Orders`), and the matched records from the left table (`Customers`). The order with `CustomerID` 5 has no matching customer.",
                query="SELECT C.Name, O.Product\nFROM Customers C\nRIGHT JOIN Orders O ON C.CustomerID = O.CustomerID;",
                tables=(table("Result", ["Name", "Product"], _MATCHED_NAME_PRODUCT + [
                    row(Name=None, Product="Webcam", unmatched=True),
                ]),),
            ),
        )),
    ),
)

FULL_OUTER_JOIN = Topic(
    description="The FULL OUTER JOIN keyword returns all records when there is a match in either left (table1) or right (table2) table records. It is a combination of LEFT JOIN and RIGHT JOIN.",
    syntax="SELECT columns\nFROM table1\nFULL OUTER JOIN table2 ON table1.column = table2.column;",
    use_case="Use it when you need a complete dataset from both tables, showing all matched and unmatched rows. For example, to see all customers and all orders, linking them where possible.",
    examples=(
        Example(title="Join Customers and Orders", steps=(
            Step(
                explanation="Start with the two base tables. All rows from both tables are included. Matching rows are green; non-matching rows are red.",
                query="-- Base Tables",
                tables=(_match_customers(True), _match_orders(True)),
            ),
            Step(
                explanation="A `FULL OUTER JOIN` returns all records when there is a match in either the left (`Customers`) or right (`Orders`) table. Unmatched rows from either table will have `NULL` values for columns from the other table.",
                query="SELECT C.Name, O.Product\nFROM Customers C\nFULL OUTER JOIN Orders O ON C.CustomerID = O.CustomerID;",
                tables=(table("Result", ["Name", "Product"], _MATCHED_NAME_PRODUCT + [
                    row(Name="Diana", Product=None, unmatched=True),
                    row(Name=None, Product="Webcam", unmatched=True),
                ]),),
            ),
        )),
    ),
)

GROUP_BY = Topic(
    description="The GROUP BY statement groups rows that have the same values into summary rows, like 'find the number of customers in each country'. The GROUP BY statement is often used with aggregate functions (COUNT(), MAX(), MIN(), SUM(), AVG()) to group the result-set by one or more columns.",
    syntax="SELECT column_name(s)\nFROM table_name\nWHERE condition\nGROUP BY column_name(s);",
    use_case="Use it to aggregate data. For example, calculating the total sales per country, or counting the number of orders for each customer.",
    examples=(
        Example(title="Count customers per country", steps=(
            _base("Start with the base table `Customers`. We will group by the `Country` column."),
            Step(
                explanation="First, the database groups the rows by `Country`.",
                query="-- Intermediate: Grouping",
                tables=tuple(
                    _where(CUSTOMERS, lambda r, c=country: r.get("Country") == c, f"Group: {country}", highlight=True)
                    for country in ("USA", "Canada", "UK")
                ),
            ),
            Step(
                explanation="Then, the `COUNT(CustomerID)` aggregate function counts the number of customers in each group.",
                query="SELECT Country, COUNT(CustomerID) AS CustomerCount\nFROM Customers\nGROUP BY Country;",
                tables=(table("Result", ["Country", "CustomerCount"], [
                    row(Country="USA", CustomerCount=2, highlight=True),
                    row(Country="Canada", CustomerCount=1, highlight=True),
                    row(Country="UK", CustomerCount=1, highlight=True),
                ]),),
            ),
        )),
        Example(title="Calculate total order amount per customer", steps=(
            _base("Start with the base table `Orders`. We will group by `CustomerID`.", ORDERS),
            Step(
                explanation="First, the rows are grouped by `CustomerID`.",
                query="-- Intermediate: Grouping",
                tables=tuple(
                    _where(ORDERS, lambda r, c=cid: r.get("CustomerID") == c, f"Group: CustomerID {cid}", highlight=True)
                    for cid in (1, 2, 3, 5)
                ),
            ),
            Step(
                explanation="Then, `SUM(Amount)` calculates the total amount for each customer group.",
                query="SELECT CustomerID, SUM(Amount) AS TotalAmount\nFROM Orders\nGROUP BY CustomerID;",
                tables=(table("Result", ["CustomerID", "TotalAmount"], [
                    row(CustomerID=1, TotalAmount=1275, highlight=True),
                    row(CustomerID=2, TotalAmount=25, highlight=True),
                    row(CustomerID=3, TotalAmount=300, highlight=True),
                    row(CustomerID=5, TotalAmount=50, highlight=True),
                ]),),
            ),
        )),
    ),
)

ORDER_BY = Topic(
    description="The ORDER BY keyword is used to sort the result-set in ascending or descending order.",
    syntax="SELECT columns\nFROM table_name\nORDER BY column1 [ASC|DESC], column2 [ASC|DESC], ...;",
    use_case="Use it whenever the sequence of the output rows matters, such as sorting customers by name, or products by price.",
    examples=(
        Example(title="Sort by one column (ASC)", steps=(
            Step(
                explanation="The `ORDER BY Name` clause sorts the result alphabetically by the `Name` column. `ASC` (ascending) is the default.",
                query="SELECT * FROM Customers ORDER BY Name;",
                tables=(CUSTOMERS.renamed("Result").with_rows(
                    sorted(CUSTOMERS.rows, key=lambda r: r.get("Name"))),),
            ),
        )),
        Example(title="Sort by one column (DESC)", steps=(
            Step(
                explanation="Using `DESC` (descending) sorts the result in reverse alphabetical order.",
                query="SELECT * FROM Customers ORDER BY Name DESC;",
                tables=(CUSTOMERS.renamed("Result").with_rows(
                    sorted(CUSTOMERS.rows, key=lambda r: r.get("Name"), reverse=True)),),
            ),
        )),
        Example(title="Sort by multiple columns", steps=(
            Step(
                explanation="This sorts first by `Department` alphabetically, and then for rows with the same department, it sorts by `Salary` in descending order.",
                query="SELECT Name, Department, Salary FROM Employees ORDER BY Department ASC, Salary DESC;",
                tables=(table("Result", ["Name", "Department", "Salary"], [
                    r.project("Name", "Department", "Salary")
                    for r in _by_department_then_salary(EMPLOYEES.rows)
                ]),),
            ),
        )),
    ),
)

UNION = Topic(
    description="The UNION operator is used to combine the result-set of two or more SELECT statements. Each SELECT statement within UNION must have the same number of columns. The columns must also have similar data types. Also, the columns in each SELECT statement must be in the same order.",
    syntax="SELECT column_name(s) FROM table1\nUNION\nSELECT column_name(s) FROM table2;",
    use_case="Use it to merge results from multiple queries into a single result set. For example, getting a combined list of all customers and employees.",
    examples=(
        Example(title="Combine names from Customers and Employees", steps=(
            Step(
                explanation="First, two separate `SELECT` statements are executed.",
                query="-- Component Queries",
                tables=(
                    table("Customers Names", ["Name"],
                          [row(Name=r.get("Name"), highlight=True) for r in CUSTOMERS.rows]),
                    table("Employees Names", ["Name"],
                          [row(Name=r.get("Name"), highlight=True) for r in EMPLOYEES.rows]),
                ),
            ),
            Step(
                explanation="The `UNION` operator combines the results of both queries into a single column and removes duplicate values. Note that `UNION ALL` would keep duplicates.",
                query="SELECT Name FROM Customers\nUNION\nSELECT Name FROM Employees;",
                tables=(table("Result", ["Name"], [
                    row(Name=name)
                    for name in sorted({r.get("Name") for r in CUSTOMERS.rows + EMPLOYEES.rows})
                ]),),
            ),
        )),
    ),
)

SUBQUERY = Topic(
    description="A subquery, or inner query, is a query nested inside another SQL query. It is used to return data that will be used in the main query as a condition to further restrict the data to be retrieved.",
    syntax="SELECT column_name(s)\nFROM table_name\nWHERE column_name IN (SELECT column_name FROM table_name WHERE ...);",
    use_case="Use subqueries to perform multi-step queries where the result of one query is needed to filter the data for another, such as finding all customers who have placed an order.",
    examples=(
        Example(title="Find customers who placed an order", steps=(
            Step(
                explanation="First, the inner query (subquery) is executed to find all unique `CustomerID`s from the `Orders` table.",
                query="SELECT DISTINCT CustomerID FROM Orders;",
                tables=(ORDERS,),
            ),
            Step(
                explanation="The subquery returns a list of `CustomerID`s.",
                query="-- Subquery Result",
                tables=(table("Subquery Result", ["CustomerID"],
                              [row(CustomerID=cid) for cid in CUSTOMER_IDS_IN_ORDERS]),),
            ),
            Step(
                explanation="Then, the outer query runs. It selects customers from the `Customers` table whose `CustomerID` is in the list returned by the subquery.",
                query="SELECT *\nFROM Customers\nWHERE CustomerID IN ({});".format(
                    ", ".join(str(cid) for cid in CUSTOMER_IDS_IN_ORDERS)),
                tables=(CUSTOMERS,),
            ),
            Step(
                explanation="The final result contains only the customers who have placed an order. Note CustomerID 4 is excluded and CustomerID 5 from orders has no match in Customers.",
                query="SELECT * FROM Customers\nWHERE CustomerID IN (SELECT DISTINCT CustomerID FROM Orders);",
                tables=(_where(CUSTOMERS, lambda r: r.get("CustomerID") in CUSTOMER_IDS_IN_ORDERS, highlight=True),),
            ),
        )),
    ),
)

CTE = Topic(
    description="A Common Table Expression (CTE) allows you to define a temporary, named result set that you can reference within a SELECT, INSERT, UPDATE, or DELETE statement. It helps to simplify complex queries.",
    syntax="WITH cte_name (column_list) AS (\n  SELECT ...\n)\nSELECT ... FROM cte_name;",
    use_case="Use CTEs to break down complex logic into readable, logical steps, such as filtering a set of data first and then joining it to another table.",
    examples=(
        Example(title="Find orders from USA customers", steps=(
            Step(
                explanation="First, define a CTE named `USA_Customers` to select only customers from the USA.",
                query="WITH USA_Customers AS (\n  SELECT CustomerID, Name FROM Customers WHERE Country = 'USA'\n)...",
                tables=(CUSTOMERS,),
            ),
            Step(
                explanation="The CTE creates a temporary, in-memory table with just the USA customers.",
                query="-- CTE Result: USA_Customers",
                tables=(table("USA_Customers (CTE)", ["CustomerID", "Name"], [
                    r.project("CustomerID", "Name") for r in CUSTOMERS.rows if r.get("Country") == "USA"
                ]),),
            ),
            Step(
                explanation="Finally, join this CTE with the `Orders` table to get the final result.",
                query="... SELECT u.Name, o.Product\nFROM USA_Customers u\nJOIN Orders o ON u.CustomerID = o.CustomerID;",
                tables=(table("Result", ["Name", "Product"], [
                    row(Name="Alice", Product="Laptop", highlight=True),
                    row(Name="Alice", Product="Keyboard", highlight=True),
                    row(Name="Charlie", Product="Monitor", highlight=True),
                ]),),
            ),
        )),
    ),
)

WINDOW_FUNCTIONS = Topic(
    description="A window function performs a calculation across a set of table rows that are somehow related to the current row. Unlike aggregate functions, window functions do not cause rows to become grouped into a single output row.",
    syntax="SELECT ...,\n  FUNCTION_NAME() OVER (PARTITION BY ... ORDER BY ...) AS alias\nFROM table_name;",
    use_case="Use them for tasks like ranking results within categories (e.g., top employees by sales per region) or calculating running totals.",
    examples=(
        Example(title="RANK() by salary per department", steps=(
            _base("Start with the `Employees` table. We want to rank employees by salary within each department.", EMPLOYEES),
            Step(
                explanation="The `PARTITION BY Department` clause divides the rows into partitions (groups). The function is applied independently to each partition.",
                query="-- Intermediate: Partitioning",
                tables=tuple(
                    _where(EMPLOYEES, lambda r, d=dept: r.get("Department") == d, f"Partition: {dept}")
                    for dept in ("Engineering", "HR", "Sales")
                ),
            ),
            Step(
                explanation="Within each partition, `ORDER BY Salary DESC` sorts the rows. Then, `RANK()` assigns a rank. Note that ties (e.g., Frank and Grace) receive the same rank, and a gap appears in the sequence afterward.",
                query="SELECT Name, Department, Salary,\n  RANK() OVER (PARTITION BY Department ORDER BY Salary DESC) AS DeptRank\nFROM Employees;",
                tables=(table("Result", ["Name", "Department", "Salary", "DeptRank"], _by_department_then_salary([
                    row(Name="Ivan", Department="Engineering", Salary=110000, DeptRank=1),
                    row(Name="Heidi", Department="Engineering", Salary=95000, DeptRank=2),
                    row(Name="Judy", Department="HR", Salary=60000, DeptRank=1),
                    row(Name="Mallory", Department="Sales", Salary=80000, DeptRank=1),
                    row(Name="Frank", Department="Sales", Salary=75000, DeptRank=2),
                    row(Name="Grace", Department="Sales", Salary=75000, DeptRank=2),
                ])),),
            ),
        )),
        Example(title="ROW_NUMBER() by salary per department", steps=(
            _base("Start with the `Employees` table.", EMPLOYEES),
            Step(
                explanation="Like `RANK()`, this function operates over partitions. However, `ROW_NUMBER()` assigns a unique, sequential number to each row within the partition, even if there are ties.",
                query="SELECT Name, Department, Salary,\n  ROW_NUMBER() OVER (PARTITION BY Department ORDER BY Salary DESC) AS RowNum\nFROM Employees;",
                tables=(table("Result", ["Name", "Department", "Salary", "RowNum"], _by_department_then_salary([
                    row(Name="Ivan", Department="Engineering", Salary=110000, RowNum=1),
                    row(Name="Heidi", Department="Engineering", Salary=95000, RowNum=2),
                    row(Name="Judy", Department="HR", Salary=60000, RowNum=1),
                    row(Name="Mallory", Department="Sales", Salary=80000, RowNum=1),
                    row(Name="Grace", Department="Sales", Salary=75000, RowNum=2),
                    row(Name="Frank", Department="Sales", Salary=75000, RowNum=3),
                ])),),
            ),
        )),
    ),
)

DML = Topic(
    description="Data Manipulation Language (DML) is used to manage data within schema objects. The main DML statements are INSERT, UPDATE, and DELETE.",
    syntax="INSERT INTO table_name ...\nUPDATE table_name SET ...\nDELETE FROM table_name WHERE ...",
    use_case="Use DML to add new data, modify existing data, or remove data from tables.",
    examples=(
        Example(title="INSERT a new row", steps=(
            _base("This is the `Customers` table before the operation.", query="-- Before INSERT"),
            Step(
                explanation="The `INSERT INTO` statement adds a new row to the table with the specified values.",
                query="INSERT INTO Customers (CustomerID, Name, Country) VALUES (5, 'Eve', 'UK');",
                tables=(CUSTOMERS.renamed("Result").with_rows(CUSTOMERS.rows + (
                    row(CustomerID=5, Name="Eve", Country="UK").flagged(inserted=True),
                )),),
            ),
        )),
        Example(title="UPDATE an existing row", steps=(
            _base("This is the `Customers` table before the operation.", query="-- Before UPDATE"),
            Step(
                explanation="The `UPDATE` statement modifies existing records. Here, we change the `Country` for `CustomerID` 4 to 'Germany'.",
                query="UPDATE Customers\nSET Country = 'Germany'\nWHERE CustomerID = 4;",
                tables=(CUSTOMERS.renamed("Result").with_rows(
                    r.flagged(values={**r.values, "Country": "Germany"}, updated=True,
                              updated_cells=frozenset({"Country"}))
                    if r.get("CustomerID") == 4 else r
                    for r in CUSTOMERS.rows
                ),),
            ),
        )),
        Example(title="DELETE a row", steps=(
            Step(
                explanation="This is the `Customers` table before the operation. The row to be deleted is highlighted.",
                query="-- Before DELETE",
                tables=(CUSTOMERS.with_rows(
                    r.flagged(unmatched=True) if r.get("CustomerID") == 2 else r for r in CUSTOMERS.rows
                ),),
            ),
            Step(
                explanation="The `DELETE` statement removes existing records. Here, we remove the customer with `CustomerID` 2.",
                query="DELETE FROM Customers WHERE CustomerID = 2;",
                tables=(_where(CUSTOMERS, lambda r: r.get("CustomerID") != 2),),
            ),
        )),
    ),
)

DDL = Topic(
    description="Data Definition Language (DDL) is used to create and modify the structure of database objects like tables. The main DDL statements are CREATE, ALTER, and DROP.",
    syntax="CREATE TABLE table_name (...)\nALTER TABLE table_name ...\nDROP TABLE table_name;",
    use_case="Use DDL when setting up or changing the database schema, such as creating a new table or adding a column to an existing one.",
    examples=(
        Example(title="CREATE a new table", steps=(
            Step(
                explanation="The `CREATE TABLE` statement defines a new table, specifying its name and the names and data types of each column.",
                query="CREATE TABLE Products (\n  ProductID INT,\n  Name VARCHAR(255),\n  Price DECIMAL(10, 2)\n);",
                tables=(table("Products (New)", ["ProductID", "Name", "Price"], []),),
            ),
        )),
        Example(title="ALTER an existing table", steps=(
            _base("This is the `Customers` table before the operation.", query="-- Before ALTER"),
            Step(
                explanation="The `ALTER TABLE` statement modifies a table definition. Here, we add a new `Email` column.",
                query="ALTER TABLE Customers\nADD Email VARCHAR(255);",
                tables=(table("Result", CUSTOMERS.columns + ("Email",), [
                    r.flagged(values={**r.values, "Email": None}) for r in CUSTOMERS.rows
                ]),),
            ),
        )),
    ),
)


SQL_TOPICS = Catalog(topics={
    "SELECT": SELECT,
    "WHERE": WHERE,
    "INNER JOIN": INNER_JOIN,
    "LEFT JOIN": LEFT_JOIN,
    "RIGHT JOIN": RIGHT_JOIN,
    "FULL OUTER JOIN": FULL_OUTER_JOIN,
    "GROUP BY": GROUP_BY,
    "ORDER BY": ORDER_BY,
    "UNION": UNION,
    "Subquery": SUBQUERY,
    "CTE": CTE,
    "Window Functions": WINDOW_FUNCTIONS,
    "DML (Data Manipulation)": DML,
    "DDL (Data Definition)": DDL,
})
